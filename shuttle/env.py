# -*- coding: utf-8 -*-
"""Public environment variables (the ones inlined into client output)."""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from shuttle.constants import DEFAULT_PUBLIC_ENV_PREFIX


def public_env_vars(
    environ: Optional[Mapping[str, str]] = None,
    *,
    prefix: str = DEFAULT_PUBLIC_ENV_PREFIX,
) -> Dict[str, str]:
    """Return every variable whose name starts with `prefix`.

    The result is sorted by name; callers that hash it must still not rely
    on that and sort again.
    """
    src = os.environ if environ is None else environ
    out: Dict[str, str] = {}
    for key in sorted(src):
        if not key.startswith(prefix):
            continue
        out[key] = str(src[key])
    return out
