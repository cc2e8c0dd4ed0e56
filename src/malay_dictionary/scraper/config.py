"""Constants for the DBP PRPM lookup page: endpoint, headers and markup markers."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

#: Origin of the dictionary service.  Relative links are resolved against it.
BASE_URL: str = "https://prpm.dbp.gov.my"

#: Path of the single lookup endpoint; the word goes in ``keyword``.
SEARCH_PATH: str = "/Cari1"

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

#: Maximum redirect hops followed when ``follow_redirects`` is enabled.
MAX_REDIRECTS: int = 5

#: Wait after the first failed attempt, in seconds; doubled after each
#: further failure (2 s, 4 s, 8 s, ...).
BACKOFF_MULTIPLIER_S: float = 2.0

#: Browser navigation headers sent with every request.  User-Agent, Referer
#: and Cookie are managed separately by the client.
DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "same-origin",
    "Sec-Fetch-User": "?1",
}

#: Desktop browser user-agents; one is picked per client when none is configured.
BROWSER_USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/128.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/128.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:130.0) Gecko/20100101 Firefox/130.0",
    "Mozilla/5.0 (X11; Linux x86_64; rv:130.0) Gecko/20100101 Firefox/130.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_6) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.6 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/128.0.0.0 Safari/537.36 Edg/128.0.0.0",
)

# ---------------------------------------------------------------------------
# Markup markers
# ---------------------------------------------------------------------------

#: Literal that marks a block as carrying a definition.
DEFINITION_MARKER: str = "Definisi :"

#: Source label used when a definition block names no ``(Kamus ...)`` source.
DEFAULT_SOURCE: str = "Kamus Inggeris-Melayu Dewan"

#: CSS classes of a dictionary-source tab panel.
TAB_PANEL_CLASSES: tuple[str, ...] = ("tab-pane", "fade")

#: Extra CSS classes carried by the tab that is open by default.
ACTIVE_TAB_CLASSES: tuple[str, ...] = ("tab-pane", "fade", "in", "active")

#: CSS class of the summary panel listing related services.
SUMMARY_PANEL_CLASS: str = "panel-body"

#: Substring identifying links back to the site's own search endpoint.
SERVICE_LINK_MARKER: str = "Cari1.aspx"

#: CSS class of a proverb block.
PROVERB_CLASS: str = "infoPeribahasa"

#: Minimum ``<tr>`` rows a proverb block needs: header + four data rows.
PROVERB_MIN_ROWS: int = 5

#: CSS class of the info element holding thesaurus text.
INFO_CLASS: str = "info"

#: Literal identifying the thesaurus info element.
TESAURUS_MARKER: str = "Tesaurus"

#: Placeholder shown when the thesaurus has nothing for the word.
NO_TESAURUS_TEXT: str = "Tiada maklumat tesaurus"
