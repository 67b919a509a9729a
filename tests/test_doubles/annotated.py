"""Test double: an interface whose annotations cannot be hashed."""

from abc import ABC, abstractmethod

# Evaluated eagerly: the annotation is the dict itself, not a string
LABEL_METADATA = {"kind": "label"}


class Tagger(ABC):
    @abstractmethod
    def tag(self, label: LABEL_METADATA) -> None: ...
