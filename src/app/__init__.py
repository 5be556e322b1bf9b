"""App — core do servico: dominio, servicos, use cases e bootstrap.

Subpastas:
- bootstrap/: composition root (logging, settings, provedor)
- constants/: perfil de campos e mensagens fixas
- domain/: NormalizedPost e NormalizedError
- services/: resolucao de referencias e taxonomia de erros
- use_cases/: leitura de post via provedor injetado
- protocols/: contratos (PostProviderProtocol)
- observability/: correlation_id
"""
