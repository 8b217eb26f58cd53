from typing import Dict, List, Optional

from .config import settings
from .schemas import ExtensionConfig

def normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else "." + ext

def resolve_extensions(param: Optional[str] = None) -> ExtensionConfig:
    """Parse ``md,txt=md`` style input into accepted extensions and a rename table.

    Tokens are not validated; ``txt=md`` accepts ``.txt`` and uploads it as ``.md``.
    Without input the configured default set is used and nothing is renamed.
    """
    if not param:
        return ExtensionConfig(accepted=tuple(normalize_ext(e) for e in settings.default_extensions))
    accepted: List[str] = []
    mapping: Dict[str, str] = {}
    for token in param.split(","):
        if "=" in token:
            parts = token.split("=")
            src, dst = normalize_ext(parts[0]), normalize_ext(parts[1])
            mapping[src] = dst
            accepted.append(src)
        else:
            accepted.append(normalize_ext(token))
    return ExtensionConfig(accepted=tuple(accepted), mapping=mapping)

def describe_extensions(config: ExtensionConfig):
    print("supported extensions:", ", ".join(config.accepted))
    if config.mapping:
        pairs = ", ".join(f"{src} -> {dst}" for src, dst in config.mapping.items())
        print("extension mapping:", pairs)
