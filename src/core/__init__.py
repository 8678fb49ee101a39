"""
Core Domain Layer - O Hexágono.

Este pacote contém os building blocks de domínio, sem dependências de frameworks.
Características:
- Nenhum framework web/ORM (apenas python-ulid para identificadores)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
