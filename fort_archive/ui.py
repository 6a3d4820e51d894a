"""
Page-load procedures for archive pages.

Each procedure is independent and side-effecting on the Page it is given.
None of them raise: a missing element, registry outage, or renderer failure
is logged and the page is left usable without that affordance.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from bs4 import Tag

from . import config
from .page import Page
from .registry import resolve_registry_source
from .symbols import SymbolRenderer, create_default_renderer
from .urls import FilterSelection, parse_filter
from .verification import VerificationResult, verify_artifact

logger = logging.getLogger(__name__)

_STATUS_STYLE = "padding: 20px; margin: 20px 0; border-radius: 8px; text-align: center; font-weight: bold;"
_VERIFIED = ("#d4edda", "#155724", "✓ Artifact verified - Hash matches registry")
_FAILED = ("#f8d7da", "#721c24", "✗ Verification failed - Hash does not match")


@dataclass(frozen=True)
class PageLoadReport:
    """What on_page_load changed on a page."""

    verification: Optional[VerificationResult]
    filter_selection: Optional[FilterSelection]
    code_rendered: bool


def render_code(
    page: Page,
    url: str,
    container_id: Optional[str] = None,
    renderer: Optional[SymbolRenderer] = None,
) -> bool:
    """Replace the container's contents with a scannable code image for url."""
    container_id = container_id or config.code_container_id()
    container = page.element_by_id(container_id)
    if container is None:
        logger.warning("Code container #%s not found; skipping", container_id)
        return False

    try:
        renderer = renderer or create_default_renderer()
        image = renderer.render(url)
    except Exception as e:
        logger.error("Code render failed for %s via %s: %s", url, getattr(renderer, "renderer_name", "?"), e)
        return False

    container.clear()
    container.append(
        page.new_tag(
            "img",
            src=image.src,
            alt=image.alt,
            width=str(image.width),
            height=str(image.height),
        )
    )
    logger.debug("Rendered code for %s into #%s", url, container_id)
    return True


def _status_div(page: Page, result: VerificationResult) -> Tag:
    background, color, text = _VERIFIED if result.is_verified else _FAILED
    div = page.new_tag(
        "div",
        style=f"{_STATUS_STYLE} background: {background}; color: {color};",
        **{"class": ["verification-status"], "data-status": result.status.value},
    )
    div.string = text
    return div


def init_verification_ui(page: Page, source: Optional[str] = None) -> Optional[VerificationResult]:
    """
    If the page URL carries a verify hash, check it against the registry and
    insert a status banner after the page header.
    """
    supplied = page.query_param(config.verify_param())
    if not supplied:
        return None

    sel = config.selectors()
    artifact_id = page.text_of(sel["artifact_id"])
    if not artifact_id:
        logger.info("verify requested but no %s element on page", sel["artifact_id"])
        return None

    # configured locations are page-relative; an explicit source is used as given
    registry_source = source if source is not None else resolve_registry_source(page.url, config.registry_source())
    result = verify_artifact(artifact_id, supplied, source=registry_source)

    header = page.select_one(sel["header"])
    if header is None:
        logger.warning("No %s element; verification status not shown", sel["header"])
        return result
    header.insert_after(_status_div(page, result))
    return result


def apply_filter_from_url(
    page: Page, controls: Optional[Dict[str, str]] = None
) -> Optional[FilterSelection]:
    """Select the filter named in the URL in its control and fire a change event."""
    if not page.url:
        return None
    selection = parse_filter(page.url)
    if selection is None:
        return None

    controls = controls if controls is not None else config.filter_controls()
    control_id = controls.get(selection.filter_type)
    if control_id is None:
        logger.info("Unknown filter category %r; ignoring", selection.filter_type)
        return None
    control = page.element_by_id(control_id)
    if control is None:
        logger.warning("Filter control #%s not found; ignoring", control_id)
        return None

    page.set_control_value(control, selection.value)
    page.dispatch_event(control, "change")
    return selection


def _canonical_page_url(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def on_page_load(
    page: Page,
    source: Optional[str] = None,
    renderer: Optional[SymbolRenderer] = None,
    container_id: Optional[str] = None,
) -> PageLoadReport:
    """Run every page-load procedure in order: verification, filters, code."""
    verification = init_verification_ui(page, source=source)
    selection = apply_filter_from_url(page)

    rendered = False
    container_id = container_id or config.code_container_id()
    if page.url and page.element_by_id(container_id) is not None:
        rendered = render_code(page, _canonical_page_url(page.url), container_id, renderer)

    return PageLoadReport(verification=verification, filter_selection=selection, code_rendered=rendered)
