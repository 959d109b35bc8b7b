"""Configuração do pytest para o relatório diário."""

import sys
from pathlib import Path

# Adiciona src/ e a raiz do repositório ao PYTHONPATH (imports absolutos e tests.fakes)
_root = Path(__file__).parent.parent
for path in (_root / "src", _root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
