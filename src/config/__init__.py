"""
Configuração do projeto.

Módulos:
- settings: Variáveis de ambiente e logging
- container: Dependency Injection Container
"""
