"""Fetching and parsing of DBP PRPM lookup pages.

Sub-modules:
- ``config``:             endpoint, header and markup-marker constants
- ``http_client``:        async httpx client with courtesy delay and retry/backoff
- ``markup``:             minimal BeautifulSoup query layer
- ``definition_parser``:  staged decomposition of definition text
- ``extractor``:          definition, related-service, proverb and thesaurus passes
"""
