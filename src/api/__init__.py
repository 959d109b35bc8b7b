"""API: camada de borda e adapters de providers.

Responsabilidades:
- Normalizar payloads externos para modelos internos

NÃO PODE conter: orquestracao de use cases, IO direto.
"""
