from typing import Optional

DEFAULT_NAME = "World"


class GreetingDomainService:
    """Domain service for greeting business logic"""

    @staticmethod
    def build_message(name: Optional[str] = None) -> str:
        """Return the greeting for name, or the default when no name is given.

        An empty string counts as a supplied name.
        """
        return f"Hello {name if name is not None else DEFAULT_NAME}!"
