# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd


def strip_search_annotations(document: Dict[str, Any]) -> Dict[str, Any]:
    """Remove ``@search.*`` / ``@odata.*`` annotation keys from a document dict."""
    return {k: v for k, v in document.items() if not k.startswith("@")}


def documents_to_dataframe(documents: List[Dict[str, Any]]) -> pd.DataFrame:
    """Convert query result documents to a DataFrame, one row per document.

    :param documents: Documents from a query page.
    """
    return pd.DataFrame([strip_search_annotations(d) for d in documents])
