"""
HTML document adapter for the Open Graph extractor.
Builds a lenient parse tree from raw HTML text.
"""
from typing import Union

from bs4 import BeautifulSoup


def load_document(html: Union[str, bytes]) -> BeautifulSoup:
    """
    Parse raw HTML into a BeautifulSoup tree.

    lxml recovers from broken markup, so this never raises for
    malformed input; empty input yields an empty document.
    """
    return BeautifulSoup(html or "", "lxml")
