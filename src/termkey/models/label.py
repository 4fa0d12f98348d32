from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DisplayLabel:
    # The composed label body, e.g. "CONTROL_L + A"
    text: str
    # How many times in a row this label has been seen, None on the
    # first occurrence so no suffix is shown
    count: Optional[int]        = None

    def __post_init__(self):
        if not self.text:
            raise ValueError("DisplayLabel text must not be empty")

    @property
    def is_repeat(self):
        return self.count is not None and self.count > 1

    def __str__(self):
        if self.is_repeat:
            return f"{self.text} [x{self.count}]"
        return self.text
