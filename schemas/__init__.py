from .add_ons import AddOnKind, AddOnSelections
from .generated_prompt import GeneratedPrompt, Scene

__all__ = [
    "AddOnKind", "AddOnSelections",
    "GeneratedPrompt", "Scene",
]
