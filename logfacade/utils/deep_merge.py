from typing import Dict


def deep_merge(base: Dict, override: Dict) -> Dict:
    """Returns a new dict with override deep-merged over base; inputs are left untouched."""
    merged = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
