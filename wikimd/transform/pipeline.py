"""Ordered text transforms run over a document."""

from abc import ABC, abstractmethod


class Transform(ABC):
    @abstractmethod
    def apply(self, content: str) -> str:
        """Transform document text (markdown or HTML, depending on the stage)."""
        ...


class TransformPipeline:
    def __init__(self, transforms: list[Transform]):
        self.transforms = transforms

    def apply(self, content: str) -> str:
        for t in self.transforms:
            content = t.apply(content)
        return content
