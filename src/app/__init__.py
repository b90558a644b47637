"""App — composition root e borda de execução do serviço.

Subpastas:
- bootstrap/: inicialização de logging, validação de settings e wiring do LineClient
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config parametriza.
"""
