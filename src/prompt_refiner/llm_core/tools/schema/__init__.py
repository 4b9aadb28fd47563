from .argument_validator import ArgumentValidator, RefinePromptArgs

__all__ = ["ArgumentValidator", "RefinePromptArgs"]
