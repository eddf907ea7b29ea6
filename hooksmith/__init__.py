"""
🪝 HOOKSMITH - Git hooks a partir de um arquivo YAML

Instala shims em .git/hooks, executa os comandos declarados quando um hook
dispara, remove hooks e compara o que está instalado com a configuração.
"""

from .__version__ import __version__

__all__ = ["__version__"]
