"""API — camada de borda e adapters de canais.

Responsabilidades:
- Receber requests de canais externos (webhooks)
- Validar assinaturas e payloads
- Normalizar dados para modelos internos imutáveis

Subpastas:
- connectors/: adapters por canal (cliente, assinatura, modelos, erros)
- normalizers/: conversão de payloads externos → modelos internos
- routes/: endpoints HTTP por canal (webhooks, health)

NÃO PODE conter: regras de negócio, despacho de respostas, persistência.
"""
