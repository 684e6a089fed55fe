# vtree/errors.py


class RenderContractError(TypeError):
    """
    Raised when input breaks the engine's contract, e.g. a component whose
    ``render()`` does not return exactly one VirtualNode.

    These are programming errors, not recoverable conditions.
    """
