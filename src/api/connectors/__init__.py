"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- line/: LINE Messaging API (webhook, assinatura, modelos de eventos)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
