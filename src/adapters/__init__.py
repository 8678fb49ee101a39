"""
Adapters - Implementações dos Ports definidos no Core.
"""
