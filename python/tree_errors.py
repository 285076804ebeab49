# Errors raised by graph construction and center finding


class TreeCenterError(Exception):
    pass


class InvalidInput(TreeCenterError, ValueError):
    """Input violates the contract of the called operation (empty graph, self loop, ...)."""


class NotATree(InvalidInput):
    """The graph has a cycle or is disconnected, so leaf peeling has no center to find."""


class DuplicateKeyConflict(TreeCenterError):
    def __init__(self, number: int):
        super().__init__(f"another node with number {number} is already in the graph")
        self.number = number
