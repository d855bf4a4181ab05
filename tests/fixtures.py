"""Inline upstream documents used across the test suite."""

import json

CDN = "https://is1-ssl.mzstatic.com/image/thumb"


# ---------------------------------------------------------------------------
# HTML pages
# ---------------------------------------------------------------------------

RATINGS_HTML = """
<html><body>
<div class="rating-count">1,234 Ratings</div>
<div class="histogram">
  <div class="vote"><span class="total">800</span></div>
  <div class="vote"><span class="total">200</span></div>
  <div class="vote"><span class="total">100</span></div>
  <div class="vote"><span class="total">50</span></div>
  <div class="vote"><span class="total">90</span></div>
</div>
</body></html>
"""

RATINGS_HTML_NO_COUNTS = """
<html><body><div class="rating-count">No Ratings</div></body></html>
"""

SCREENSHOTS_HTML = f"""
<html><body>
<ul class="shelf-grid__list shelf-grid__list--grid-type-ScreenshotPhone">
  <li><picture>
    <source type="image/webp" srcset="{CDN}/a/300x650bb.webp 300w, {CDN}/a/600x1300bb.webp 600w" />
    <source type="image/jpeg" srcset="{CDN}/a/600x1300bb.jpg 600w" />
  </picture></li>
  <li><picture>
    <source type="image/webp" srcset="{CDN}/a/230x498bb.webp 230w, {CDN}/a/460x996bb.webp 460w" />
  </picture></li>
  <li><picture>
    <source type="image/webp" srcset="{CDN}/b/460x996bb.webp 460w, {CDN}/b/230x498bb.webp 230w" />
  </picture></li>
  <li><picture>
    <source type="image/webp" />
  </picture></li>
</ul>
<ul class="shelf-grid__list shelf-grid__list--grid-type-ScreenshotPad">
  <li><picture>
    <source type="image/webp" srcset="{CDN}/c/1024x768bb-60.jpg 1024w" />
  </picture></li>
</ul>
</body></html>
"""

APP_PAGE_WITHOUT_SCREENSHOTS = "<html><body><h1>Some App</h1></body></html>"

VERSION_HISTORY_HTML = """
<html><body>
<dialog data-testid="dialog">
  <article class="svelte-13339ih">
    <h4 class="svelte-13339ih">2.1.0</h4>
    <time datetime="2024-05-01T00:00:00.000Z">May 1, 2024</time>
    <p class="svelte-13339ih">
      Bug fixes and performance improvements.
    </p>
  </article>
  <article class="svelte-13339ih">
    <h4 class="svelte-13339ih">2.0.0</h4>
    <time>Apr 2, 2024</time>
  </article>
</dialog>
<article class="svelte-13339ih"><h4 class="svelte-13339ih">outside</h4></article>
</body></html>
"""

PRIVACY_HTML = """
<html><body>
<dialog data-testid="dialog">
  <a data-test-id="external-link" aria-label="Developer Website" href="https://dev.example.com">Website</a>
  <a data-test-id="external-link" aria-label="Privacy Policy (opens in a new window)" href="https://example.com/privacy">Privacy</a>
  <a data-test-id="external-link" aria-label="Privacy Policy" href="https://example.com/second">Privacy</a>
  <section class="purpose-section">
    <h3>Analytics</h3>
    <ul>
      <li class="purpose-category">
        <span class="category-title">Identifiers</span>
        <ul class="privacy-data-types"><li>User ID</li><li>Device ID</li></ul>
      </li>
      <li class="purpose-category">
        <span class="category-title">Usage Data</span>
        <ul class="privacy-data-types"></ul>
      </li>
    </ul>
  </section>
  <section class="purpose-section">
    <h3>App Functionality</h3>
    <ul>
      <li class="purpose-category">
        <span class="category-title">Contact Info</span>
        <ul class="privacy-data-types"><li>Email Address</li></ul>
      </li>
    </ul>
  </section>
</dialog>
</body></html>
"""

PRIVACY_HTML_HEADERS_ONLY = """
<html><body>
<dialog data-testid="dialog">
  <a data-test-id="external-link" aria-label="Developer Website" href="https://dev.example.com">Website</a>
  <section class="purpose-section">
    <h3>Analytics</h3>
    <ul><li class="purpose-category"><span class="category-title">Usage Data</span></li></ul>
  </section>
</dialog>
</body></html>
"""


# ---------------------------------------------------------------------------
# Autocomplete property lists
# ---------------------------------------------------------------------------

PLIST_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
)

SUGGEST_XML = PLIST_HEADER + """
<plist version="1.0"><dict>
  <key>title</key><string>Suggestions</string>
  <key>hints</key>
  <array>
    <dict><key>term</key><string>minecraft</string><key>priority</key><integer>0</integer></dict>
    <dict><key>term</key><string>minecraft pocket edition</string><key>url</key><string>https://example.com</string></dict>
  </array>
</dict></plist>
"""

SUGGEST_XML_SINGLE = PLIST_HEADER + """
<plist version="1.0"><dict>
  <key>hints</key>
  <array><dict><key>term</key><string>minecraft</string></dict></array>
</dict></plist>
"""

SUGGEST_XML_EMPTY_ARRAY = PLIST_HEADER + """
<plist version="1.0"><dict><key>hints</key><array></array></dict></plist>
"""

SUGGEST_XML_NO_DICT = PLIST_HEADER + """
<plist version="1.0"><dict><key>hints</key><array><string>orphan</string></array></dict></plist>
"""

SUGGEST_XML_EMPTY_ROOT_DICT = PLIST_HEADER + """
<plist version="1.0"><dict/></plist>
"""

SUGGEST_XML_EMPTY_ENTRY = PLIST_HEADER + """
<plist version="1.0"><dict>
  <key>hints</key>
  <array><dict/><dict><key>term</key><string>minecraft</string></dict></array>
</dict></plist>
"""


# ---------------------------------------------------------------------------
# JSON catalog entries
# ---------------------------------------------------------------------------


def catalog_entry(track_id=553834731, **overrides):
    """Build an iTunes Search/Lookup software entry."""
    entry = {
        "kind": "software",
        "wrapperType": "software",
        "trackId": track_id,
        "bundleId": f"com.example.app{track_id}",
        "trackName": f"App {track_id}",
        "trackViewUrl": f"https://apps.apple.com/us/app/id{track_id}",
        "description": "An example application.",
        "artworkUrl60": f"{CDN}/icon/60x60bb.jpg",
        "artworkUrl100": f"{CDN}/icon/100x100bb.jpg",
        "artworkUrl512": f"{CDN}/icon/512x512bb.jpg",
        "genres": ["Games", "Puzzle"],
        "genreIds": ["6014", "7012"],
        "primaryGenreName": "Games",
        "primaryGenreId": 6014,
        "contentAdvisoryRating": "4+",
        "languageCodesISO2A": ["EN", "FR"],
        "fileSizeBytes": "123456789",
        "minimumOsVersion": "15.0",
        "releaseDate": "2012-11-14T14:41:32Z",
        "currentVersionReleaseDate": "2024-05-01T07:00:00Z",
        "releaseNotes": "Bug fixes.",
        "version": "2.1.0",
        "price": 0.0,
        "currency": "USD",
        "artistId": 526656015,
        "artistName": "Example Studio",
        "artistViewUrl": "https://apps.apple.com/us/developer/id526656015",
        "sellerUrl": "https://example.com",
        "averageUserRating": 4.5,
        "userRatingCount": 1234,
        "averageUserRatingForCurrentVersion": 4.4,
        "userRatingCountForCurrentVersion": 1000,
        "screenshotUrls": [f"{CDN}/s/1.png", f"{CDN}/s/2.png"],
        "ipadScreenshotUrls": [f"{CDN}/s/ipad.png"],
        "appletvScreenshotUrls": [],
        "supportedDevices": ["iPhone15-iPhone15"],
    }
    entry.update(overrides)
    return entry


def lookup_body(*entries):
    return json.dumps({"resultCount": len(entries), "results": list(entries)})


# ---------------------------------------------------------------------------
# Reviews RSS feed
# ---------------------------------------------------------------------------


def review_entry(review_id="1001", rating="5", **overrides):
    entry = {
        "author": {
            "uri": {"label": "https://itunes.apple.com/us/reviews/id42"},
            "name": {"label": "jane"},
            "label": "",
        },
        "updated": {"label": "2024-05-02T10:00:00-07:00"},
        "im:rating": {"label": rating},
        "im:version": {"label": "2.1.0"},
        "id": {"label": review_id},
        "title": {"label": "Great"},
        "content": {"label": "Works well.", "attributes": {"type": "text"}},
        "link": {"attributes": {"rel": "related", "href": "https://itunes.apple.com/review/1001"}},
    }
    entry.update(overrides)
    return entry


def reviews_body(entries):
    feed = {"author": {"name": {"label": "iTunes Store"}}}
    if entries is not None:
        feed["entry"] = entries
    return json.dumps({"feed": feed})


def list_entry(track_id="284882215", **overrides):
    """Build a top-chart RSS entry."""
    entry = {
        "im:name": {"label": f"App {track_id}"},
        "im:image": [
            {"label": f"{CDN}/list/53x53bb.png", "attributes": {"height": "53"}},
            {"label": f"{CDN}/list/75x75bb.png", "attributes": {"height": "75"}},
            {"label": f"{CDN}/list/100x100bb.png", "attributes": {"height": "100"}},
        ],
        "summary": {"label": "A chart app."},
        "im:price": {"label": "Get", "attributes": {"amount": "0.00000", "currency": "USD"}},
        "id": {
            "label": f"https://apps.apple.com/us/app/app/id{track_id}?uo=2",
            "attributes": {"im:id": track_id, "im:bundleId": f"com.example.list{track_id}"},
        },
        "im:artist": {
            "label": "Chart Studio",
            "attributes": {"href": "https://apps.apple.com/us/developer/chart-studio/id389801255?uo=2"},
        },
        "category": {
            "attributes": {"im:id": "6005", "term": "Social Networking", "label": "Social Networking"}
        },
        "im:releaseDate": {"label": "2019-02-05T08:00:00-07:00"},
        "link": [
            {"attributes": {"rel": "alternate", "type": "text/html", "href": f"https://apps.apple.com/us/app/id{track_id}"}},
        ],
    }
    entry.update(overrides)
    return entry


def list_body(entries):
    feed = {"author": {"name": {"label": "iTunes Store"}}}
    if entries is not None:
        feed["entry"] = entries
    return json.dumps({"feed": feed})
