"""Chess piece move generation and display-free menu and rules screens."""

__version__ = "0.1.0"
__all__ = ["main_menu", "pieces", "rules", "sliding", "state"]