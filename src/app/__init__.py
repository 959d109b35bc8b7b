"""App: orquestracao, casos de uso e infraestrutura do relatorio diario.

Subpastas:
- bootstrap/: composition root (factories, inicializacao, wiring)
- use_cases/: caso de uso do relatorio (sem IO direto)
- services/: resolucao de categorias, agregacao, linha do relatorio e resumo
- infra/: implementacoes concretas de IO (Calendar, Sheets, Slack)
- protocols/: contratos dos colaboradores externos
- domain/: modelos de dominio
- observability/: correlation_id da execucao e metricas

Padrao: app executa; api adapta; config configura; utils apoia.
"""
