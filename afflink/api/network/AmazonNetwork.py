"""Amazon Associates network plugin."""

import re
from urllib.parse import parse_qsl, urlencode, urlsplit

from ...utils.clock_token import clock_token
from ...utils.normalize_slug import normalize_slug
from ...utils.url_parts import bare_host
from ._AbstractNetwork import _AbstractNetwork
from .NetworkOptions import NetworkOptions

AMAZON_DOMAINS = (
    "amazon.com",
    "amazon.co.uk",
    "amazon.de",
    "amazon.fr",
    "amazon.it",
    "amazon.es",
    "amazon.ca",
    "amazon.com.au",
    "amazon.co.jp",
    "amazon.in",
    "amzn.to",
    "amzn.com",
)

# Product page (/dp/ASIN, /gp/product/ASIN) and short-link patterns, tried in order
AMAZON_PATTERNS = (
    re.compile(r"/(?:dp|gp/product)/([A-Z0-9]{10})", re.IGNORECASE),
    re.compile(r"amzn\.to/([A-Za-z0-9]+)"),
)

AFFILIATE_MARKERS = ("tag=", "linkCode=", "creative=", "camp=")

TRACKING_PARAMS = frozenset({"tag", "linkCode", "creative", "creativeASIN", "camp", "ref"})

_TAG_VALUE = re.compile(r"tag=[^&]+")


def _match_domain(url: str) -> str | None:
    host = bare_host(url)
    if not host:
        return None
    for domain in AMAZON_DOMAINS:
        if host == domain or host.endswith("." + domain):
            return domain
    return None


class AmazonNetwork(_AbstractNetwork):
    network_id = "amazon"

    def detect(self, url: str) -> bool:
        if _match_domain(url) is None:
            return False
        try:
            query_keys = {key for key, _ in parse_qsl(urlsplit(url).query, keep_blank_values=True)}
        except ValueError:
            return False
        has_tag = "tag" in query_keys or any(marker in url for marker in AFFILIATE_MARKERS)
        # Product links count even without an explicit tag
        is_product_link = any(pattern.search(url) for pattern in AMAZON_PATTERNS)
        return has_tag or is_product_link

    def convert(self, url: str, options: NetworkOptions) -> str:
        asin = self.extract_product_id(url)
        if not asin:
            return self._update_tag(url, options.tag, options.clean_params)

        domain = _match_domain(url) or "amazon.com"
        clean_url = f"https://www.{domain}/dp/{asin}"
        if options.tag:
            clean_url += f"?tag={options.tag}"
        return clean_url

    def extract_product_id(self, url: str) -> str | None:
        for pattern in AMAZON_PATTERNS:
            match = pattern.search(url)
            if match and match.group(1):
                # Short links redirect; the ASIN is not in the URL
                if "amzn.to" in url:
                    return None
                return match.group(1)
        return None

    def generate_slug(self, url: str, display_text: str) -> str:
        if display_text and display_text != url:
            slug = normalize_slug(display_text)
            if slug:
                return slug

        asin = self.extract_product_id(url)
        if asin:
            return f"amazon-{asin.lower()}"

        return f"amazon-product-{clock_token()}"

    @staticmethod
    def _update_tag(url: str, tag: str | None, clean_params: bool) -> str:
        if not tag:
            return url

        try:
            parts = urlsplit(url)
        except ValueError:
            if "tag=" in url:
                return _TAG_VALUE.sub(lambda _: f"tag={tag}", url, count=1)
            separator = "&" if "?" in url else "?"
            return f"{url}{separator}tag={tag}"

        dropped = TRACKING_PARAMS if clean_params else frozenset({"tag"})
        params = [(key, value) for key, value in parse_qsl(parts.query, keep_blank_values=True) if key not in dropped]
        params.append(("tag", tag))
        return parts._replace(query=urlencode(params)).geturl()
