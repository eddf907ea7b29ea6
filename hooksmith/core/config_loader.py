"""
HOOKSMITH - Config Loader
Carrega e valida o arquivo de configuração YAML (hooksmith.yaml).
"""

from pathlib import Path
from typing import Any, Dict, Union
import yaml

from ..errors import ConfigNotFoundError, ConfigParseError
from .models import Hook, HooksConfig


DEFAULT_CONFIG_FILE = "hooksmith.yaml"
MERGE_TAG = "tag:yaml.org,2002:merge"


# =============================================================================
# YAML Loader
# =============================================================================

class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader que rejeita chaves duplicadas em um mapeamento."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            if key_node.tag == MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=deep)
            try:
                duplicated = key in seen
            except TypeError:
                # Chave não-hashable: deixa o SafeLoader reportar
                break
            if duplicated:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


# =============================================================================
# Loader Principal
# =============================================================================

class ConfigLoader:
    """
    Carrega a configuração de hooks.

    Responsabilidades:
    - Ler o arquivo YAML
    - Validar a estrutura (mapeamento de nome -> {commands: [str]})
    - Converter para objetos tipados (Hook, HooksConfig)

    Nomes de hook NÃO são validados aqui; isso é papel do HookNameValidator.
    """

    def load_from_file(self, filepath: Union[str, Path]) -> HooksConfig:
        """
        Carrega a configuração de um arquivo YAML.

        Args:
            filepath: Caminho para o arquivo de configuração

        Returns:
            HooksConfig carregado

        Raises:
            ConfigNotFoundError: Se o arquivo não existir
            ConfigParseError: Se o documento for inválido
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            raise ConfigNotFoundError(filepath)

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.load(f, Loader=UniqueKeyLoader)
        except yaml.YAMLError as e:
            raise ConfigParseError(filepath, f"erro ao parsear YAML: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(filepath, f"erro ao ler arquivo: {e}")

        return self.load_from_dict(data, source_file=str(filepath))

    def load_from_dict(self, data: Any, source_file: str = "unknown") -> HooksConfig:
        """
        Converte um documento já decodificado em HooksConfig.

        Args:
            data: Documento decodificado do YAML
            source_file: Nome do arquivo de origem (para mensagens)
        """
        if not isinstance(data, dict):
            raise ConfigParseError(
                source_file,
                "o documento deve conter um mapeamento de hooks no nível raiz"
            )

        hooks: Dict[str, Hook] = {}

        for hook_name, hook_data in data.items():
            if not isinstance(hook_name, str):
                raise ConfigParseError(
                    source_file,
                    f"nome de hook deve ser string, encontrado: {hook_name!r}"
                )
            hooks[hook_name] = self._load_hook(hook_name, hook_data, source_file)

        return HooksConfig(hooks=hooks, source_file=source_file)

    def _load_hook(self, hook_name: str, data: Any, source_file: str) -> Hook:
        """Carrega um hook individual. Campos desconhecidos são ignorados."""

        if not isinstance(data, dict):
            raise ConfigParseError(
                source_file,
                f"hook '{hook_name}' deve ser um objeto com o campo 'commands'"
            )

        if 'commands' not in data:
            raise ConfigParseError(
                source_file,
                f"hook '{hook_name}': campo obrigatório 'commands' não encontrado"
            )

        commands = data['commands']

        if not isinstance(commands, list):
            raise ConfigParseError(
                source_file,
                f"hook '{hook_name}': 'commands' deve ser uma lista"
            )

        for idx, command in enumerate(commands):
            if not isinstance(command, str):
                raise ConfigParseError(
                    source_file,
                    f"hook '{hook_name}': comando #{idx} deve ser string, "
                    f"encontrado: {command!r}"
                )

        return Hook(commands=list(commands))


# =============================================================================
# Helper Functions
# =============================================================================

def load_config(filepath: Union[str, Path] = DEFAULT_CONFIG_FILE) -> HooksConfig:
    """Helper para carregar a configuração de um arquivo."""
    return ConfigLoader().load_from_file(filepath)


def load_config_from_dict(data: Any, source_file: str = "unknown") -> HooksConfig:
    """Helper para carregar a configuração de um documento já parseado."""
    return ConfigLoader().load_from_dict(data, source_file=source_file)


__all__ = [
    'DEFAULT_CONFIG_FILE',
    'ConfigLoader',
    'UniqueKeyLoader',
    'load_config',
    'load_config_from_dict',
]
