from __future__ import annotations
import logging, sys

_ROOT = "brdocs"

def get_logger(name: str = _ROOT, level: int | str | None = None) -> logging.Logger:
    """
    Logger do pacote. O handler de stdout fica só no logger raiz `brdocs`;
    módulos pedem filhos com get_logger(__name__).
    """
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        if level is None:
            # import tardio: config importa models, que importam este módulo
            from .config import setting
            level = setting("BRDOCS_LOG_LEVEL")
    if level is not None:
        root.setLevel(level.upper() if isinstance(level, str) else level)

    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return root.getChild(name)
