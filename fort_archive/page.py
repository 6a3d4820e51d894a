"""
Page context: a parsed archive page plus the URL it was loaded from.

Wraps a BeautifulSoup document with the small DOM surface the page-load
procedures need: lookup by id or selector, control value updates, and change
notifications to registered listeners.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .urls import query_param

logger = logging.getLogger(__name__)

Listener = Callable[[Tag, str], None]


class Page:
    """A single page view. Not shared across page loads."""

    def __init__(self, html: str, url: str = "") -> None:
        self.url = url
        self.soup = BeautifulSoup(html, "html.parser")
        self.dispatched: List[Tuple[str, str]] = []
        self._listeners: Dict[Tuple[str, str], List[Listener]] = {}

    def query_param(self, name: str) -> Optional[str]:
        return query_param(self.url, name) if self.url else None

    def element_by_id(self, element_id: str) -> Optional[Tag]:
        el = self.soup.find(id=element_id)
        return el if isinstance(el, Tag) else None

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def text_of(self, selector: str) -> Optional[str]:
        """Stripped text of the first match, or None if absent or empty."""
        el = self.select_one(selector)
        if el is None:
            return None
        text = el.get_text(strip=True)
        return text or None

    def new_tag(self, name: str, **attrs) -> Tag:
        return self.soup.new_tag(name, attrs=attrs)

    def add_event_listener(self, element_id: str, event_type: str, callback: Listener) -> None:
        self._listeners.setdefault((element_id, event_type), []).append(callback)

    def dispatch_event(self, element: Tag, event_type: str) -> None:
        """
        Record the event and call listeners registered for this element id.
        A failing listener is logged and does not stop the others.
        """
        element_id = str(element.get("id", ""))
        self.dispatched.append((element_id, event_type))
        for callback in self._listeners.get((element_id, event_type), []):
            try:
                callback(element, event_type)
            except Exception:
                logger.exception("Listener for %s on #%s failed", event_type, element_id)

    def set_control_value(self, element: Tag, value: str) -> bool:
        """
        Set a form control's value. Returns False when a <select> has no option
        with that value (the control is then left with nothing selected).
        """
        if element.name == "select":
            matched = False
            for opt in element.find_all("option"):
                opt_value = opt.get("value")
                if opt_value is None:
                    opt_value = opt.get_text(strip=True)
                if not matched and opt_value == value:
                    opt["selected"] = "selected"
                    matched = True
                elif opt.has_attr("selected"):
                    del opt["selected"]
            if not matched:
                logger.debug("No option %r in select #%s", value, element.get("id", ""))
            return matched
        if element.name == "textarea":
            element.string = value
            return True
        element["value"] = value
        return True

    def to_html(self) -> str:
        return str(self.soup)


def load_page(path: str | Path, url: Optional[str] = None) -> Page:
    """Read an HTML file; the page URL defaults to its file:// URI."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        html = f.read()
    return Page(html, url=url if url is not None else path.resolve().as_uri())
