"""Warnings emitted by tabalign."""


class TabalignWarning(UserWarning):
    """Emitted when a writer configuration is accepted but adjusted, such as
    `ALIGN_RIGHT` being dropped because padding is done with tabs.

    Silence with:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=TabalignWarning)
    """
