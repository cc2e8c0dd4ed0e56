"""Shared pytest fixtures for malay-dictionary tests.

Fixture summary
---------------
search_page_html:    Full lookup page: source tabs, active tab, summary
                      panel, proverb blocks and thesaurus info.
no_results_html:     Lookup page for a word with no definitions.
fallback_page_html:  Page without tab panels; definition only in a <b>.
sleep_calls:         Recording replacement for ``asyncio.sleep``.
recording_sleep:     The coroutine that appends to ``sleep_calls``.
transport_config:    TransportConfig with delays disabled for fast tests.

All tests run without network access; HTTP is mocked with ``respx``.
"""

from __future__ import annotations

import os
from collections.abc import Awaitable, Callable

import pytest

# ---------------------------------------------------------------------------
# Test environment bootstrap
# ---------------------------------------------------------------------------
# Keep a developer's MALAY_DICT_* environment or .env from leaking into tests.

for _key in list(os.environ):
    if _key.startswith("MALAY_DICT_"):
        del os.environ[_key]

from malay_dictionary.config.settings import get_settings  # noqa: E402
from malay_dictionary.core.schemas.transport import TransportConfig  # noqa: E402

get_settings.cache_clear()


# ---------------------------------------------------------------------------
# HTML fixtures
# ---------------------------------------------------------------------------

SEARCH_PAGE_HTML = """
<!DOCTYPE html>
<html lang="ms">
<head><title>Carian Umum - PRPM</title></head>
<body>
  <div class="panel panel-default">
    <div class="panel-body">
      <a href="Cari1.aspx?keyword=hello&amp;d=10">Kamus Dewan</a> <i>(3)</i><br/>
      <a href="https://prpm.dbp.gov.my/Cari1.aspx?keyword=hello&amp;d=175">Istilah MABBIM</a><br/>
      <a href="Cari1.aspx?keyword=hello&amp;d=20">Kamus Inggeris-Melayu Dewan</a> <i>(tiada)</i>
      <a href="Hubungi.aspx">Hubungi kami</a> <i>(9)</i>
    </div>
  </div>

  <div class="tab-content">
    <div id="tab1" class="tab-pane fade in active">
      <b>hello</b>
      <b>Definisi :</b> interj (ucapan) helo, hai
      <i>(Kamus Inggeris-Melayu Dewan)</i>
    </div>
    <div id="tab2" class="tab-pane fade">
      <b>hello</b>
      <b>Definisi :</b> interj (ucapan) helo, hai
      <i>(Kamus Inggeris-Melayu Dewan)</i>
    </div>
    <div id="tab3" class="tab-pane fade">
      <b>hello</b>
      <b>Definisi :</b> n (noun) (formal) ucapan salam
      <i>(Kamus Dewan Perdana)</i>
    </div>
    <div id="tab4" class="tab-pane fade">
      Tiada maklumat untuk kamus ini.
    </div>
  </div>

  <div class="infoPeribahasa">
    <table>
      <tr><th>Peribahasa</th></tr>
      <tr><td>PB-1021</td></tr>
      <tr><td>Bagai aur dengan tebing</td></tr>
      <tr><td>Like bamboo and the riverbank</td></tr>
      <tr><td>Saling membantu antara satu sama lain</td></tr>
    </table>
    <a href="Cari1.aspx?keyword=aur&amp;d=peribahasa">Lihat</a>
    <a href="Cari1.aspx?keyword=hello&amp;d=peribahasa">Peribahasa (4)</a>
  </div>
  <div class="infoPeribahasa">
    <table>
      <tr><th>Peribahasa</th></tr>
      <tr><td></td></tr>
      <tr><td>Tanpa pengenalan</td></tr>
      <tr><td>Without an identifier</td></tr>
      <tr><td>Dibuang</td></tr>
    </table>
  </div>
  <div class="infoPeribahasa">
    <table>
      <tr><th>Peribahasa</th></tr>
      <tr><td>PB-9</td></tr>
      <tr><td>Terlalu pendek</td></tr>
    </table>
  </div>

  <div class="info">Tesaurus: helo, hai, apa khabar</div>
</body>
</html>
"""

NO_RESULTS_HTML = """
<html><body>
  <div class="tab-content">
    <div class="tab-pane fade in active">Tiada maklumat untuk kata ini.</div>
  </div>
  <div class="info">Tesaurus: Tiada maklumat tesaurus untuk kata ini.</div>
</body></html>
"""

FALLBACK_PAGE_HTML = """
<html><body>
  <div class="result">
    <p>word <b>Definisi :</b> v (verb) (formal) meaning text (Kamus Inggeris-Melayu Dewan)</p>
  </div>
</body></html>
"""


@pytest.fixture()
def search_page_html() -> str:
    return SEARCH_PAGE_HTML


@pytest.fixture()
def no_results_html() -> str:
    return NO_RESULTS_HTML


@pytest.fixture()
def fallback_page_html() -> str:
    return FALLBACK_PAGE_HTML


# ---------------------------------------------------------------------------
# Timing fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sleep_calls() -> list[float]:
    return []


@pytest.fixture()
def recording_sleep(sleep_calls: list[float]) -> Callable[[float], Awaitable[None]]:
    """Drop-in for ``asyncio.sleep`` that records durations and returns at once."""

    async def _sleep(seconds: float) -> None:
        sleep_calls.append(seconds)

    return _sleep


@pytest.fixture()
def transport_config() -> TransportConfig:
    return TransportConfig(timeout=5_000, retries=3, delay=0, user_agent="TestAgent/1.0")
