from classlint.source.fixes import apply_fixes
from classlint.source.locate import ClassList, find_class_lists, locate, token_positions

__all__ = ["ClassList", "find_class_lists", "token_positions", "locate", "apply_fixes"]
