"""API — camada de borda: adapters de fontes externas.

Subpastas:
- normalizers/: conversão de payloads externos → modelos internos

NÃO PODE conter: I/O de rede, cache ou persistência.
"""
