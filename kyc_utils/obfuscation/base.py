from abc import ABC, abstractmethod


class BaseObfuscationStrategy(ABC):
    """Contract for all masking strategies."""

    @abstractmethod
    def obfuscate(self, text: str) -> str:
        """Mask *text* for safe display or logging.

        Args:
            text: Input already matched by the classifier for this strategy.

        Returns:
            The masked string.
        """
