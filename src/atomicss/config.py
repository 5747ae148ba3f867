from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerOptions:
    class_name_prefix: str = "x"
    dev: bool = False
    filename: str = ""
    mirror_logical_properties: bool = True
    use_rem_for_font_size: bool = False
    root_font_size: int = 16

    def __post_init__(self) -> None:
        if not self.class_name_prefix or not self.class_name_prefix[0].isalpha():
            raise ValueError("class_name_prefix must start with a letter")
        if self.root_font_size <= 0:
            raise ValueError("root_font_size must be positive")
