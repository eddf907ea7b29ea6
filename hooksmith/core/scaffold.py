"""
HOOKSMITH - Config Scaffold
Gera o conteúdo inicial do hooksmith.yaml para o comando `init`.
"""

from typing import Dict, Iterable, List, Tuple


# hook -> (mensagem do echo, linhas de exemplo comentadas)
HOOK_EXAMPLES: Dict[str, Tuple[str, List[str]]] = {
    "pre-commit": (
        "Running pre-commit checks...",
        [
            "# Add your pre-commit commands here",
            "# Examples:",
            "# - ruff check .",
            "# - black --check .",
        ],
    ),
    "pre-push": (
        "Running pre-push checks...",
        [
            "# Add your pre-push commands here",
            "# Examples:",
            "# - pytest",
            "# - python -m build",
        ],
    ),
    "commit-msg": (
        "Validating commit message...",
        [
            "# Add your commit message validation here",
            "# Example:",
            "# - ./scripts/validate-commit-msg.sh $1",
        ],
    ),
    "post-commit": (
        "Post-commit actions...",
        ["# Add your post-commit commands here"],
    ),
}


def generate_hook_config(hook_name: str) -> str:
    """Gera o bloco YAML de um hook, com um echo e exemplos comentados."""
    echo_msg, examples = HOOK_EXAMPLES.get(
        hook_name,
        (f"Running {hook_name} hook...", ["# Add your commands here"]),
    )

    lines = [
        f"{hook_name}:",
        "  commands:",
        f'    - echo "{echo_msg}"',
    ]
    lines.extend(f"    {example}" for example in examples)

    return "\n".join(lines) + "\n\n"


def render_config(hook_names: Iterable[str]) -> str:
    """Gera o arquivo completo para os hooks escolhidos."""
    return "".join(generate_hook_config(name) for name in hook_names)


__all__ = [
    "HOOK_EXAMPLES",
    "generate_hook_config",
    "render_config",
]
