"""
App Store 常量定义

包含接口 URL、请求头、页面选择器、店面编号等常量
"""

# iTunes 接口
SEARCH_URL = "https://itunes.apple.com/search"
LOOKUP_URL = "https://itunes.apple.com/lookup"
SUGGEST_URL = "https://search.itunes.apple.com/WebObjects/MZSearchHints.woa/wa/hints"
RATINGS_URL = "https://itunes.apple.com/{country}/customer-reviews/id{app_id}"
REVIEWS_URL = "https://itunes.apple.com/{country}/rss/customerreviews/page={page}/id={app_id}/sortby={sort}/json"
LIST_URL = "https://itunes.apple.com/WebObjects/MZStoreServices.woa/ws/RSS/{collection}/{genre}limit={num}/json?s={store_front}"

# App Store 网页
APP_STORE_WEB_URL = "https://apps.apple.com/"
APP_PAGE_URL = "https://apps.apple.com/{country}/app/id{app_id}"

# 默认参数
DEFAULT_COUNTRY = "us"
DEFAULT_SEARCH_NUM = 50
DEFAULT_STORE_FRONT = 143441  # US

# 评论 RSS 配置
REVIEWS_MAX_PAGE = 10
REVIEW_SORTS = {
    "mostRecent": "mostrecent",
    "mostHelpful": "mosthelpful",
}

# 排行榜 RSS 配置
DEFAULT_LIST_NUM = 50
LIST_MAX_NUM = 200

# 排行榜类型
COLLECTION = {
    "TOP_MAC": "topmacapps",
    "TOP_FREE_MAC": "topfreemacapps",
    "TOP_GROSSING_MAC": "topgrossingmacapps",
    "TOP_PAID_MAC": "toppaidmacapps",
    "NEW_IOS": "newapplications",
    "NEW_FREE_IOS": "newfreeapplications",
    "NEW_PAID_IOS": "newpaidapplications",
    "TOP_FREE_IOS": "topfreeapplications",
    "TOP_FREE_IPAD": "topfreeipadapplications",
    "TOP_GROSSING_IOS": "topgrossingapplications",
    "TOP_GROSSING_IPAD": "topgrossingipadapplications",
    "TOP_PAID_IOS": "toppaidapplications",
    "TOP_PAID_IPAD": "toppaidipadapplications",
}
DEFAULT_COLLECTION = COLLECTION["TOP_FREE_IOS"]

# 应用分类 -> genreId
CATEGORY = {
    "BOOKS": 6018,
    "BUSINESS": 6000,
    "CATALOGS": 6022,
    "EDUCATION": 6017,
    "ENTERTAINMENT": 6016,
    "FINANCE": 6015,
    "FOOD_AND_DRINK": 6023,
    "GAMES": 6014,
    "GAMES_ACTION": 7001,
    "GAMES_ADVENTURE": 7002,
    "GAMES_ARCADE": 7003,
    "GAMES_BOARD": 7004,
    "GAMES_CARD": 7005,
    "GAMES_CASINO": 7006,
    "GAMES_DICE": 7007,
    "GAMES_EDUCATIONAL": 7008,
    "GAMES_FAMILY": 7009,
    "GAMES_MUSIC": 7011,
    "GAMES_PUZZLE": 7012,
    "GAMES_RACING": 7013,
    "GAMES_ROLE_PLAYING": 7014,
    "GAMES_SIMULATION": 7015,
    "GAMES_SPORTS": 7016,
    "GAMES_STRATEGY": 7017,
    "GAMES_TRIVIA": 7018,
    "GAMES_WORD": 7019,
    "HEALTH_AND_FITNESS": 6013,
    "LIFESTYLE": 6012,
    "MAGAZINES_AND_NEWSPAPERS": 6021,
    "MEDICAL": 6020,
    "MUSIC": 6011,
    "NAVIGATION": 6010,
    "NEWS": 6009,
    "PHOTO_AND_VIDEO": 6008,
    "PRODUCTIVITY": 6007,
    "REFERENCE": 6006,
    "SHOPPING": 6024,
    "SOCIAL_NETWORKING": 6005,
    "SPORTS": 6004,
    "TRAVEL": 6003,
    "UTILITIES": 6002,
    "WEATHER": 6001,
}

# 设备 -> Search 接口的 entity 参数
DEVICE = {
    "IPAD": "iPadSoftware",
    "MAC": "macSoftware",
    "ALL": "software",
}
DEFAULT_DEVICE = DEVICE["ALL"]

# 评分页面请求头（后缀 12 表示网页端平台）
STORE_FRONT_HEADER = "X-Apple-Store-Front"
STORE_FRONT_PLATFORM = 12
RATINGS_DISPLAYABLE_KIND = 11

# 浏览器请求头（网页抓取使用）
MINIMAL_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

# 截图地址规范化：把尺寸后缀统一替换为固定尺寸 PNG
SCREENSHOT_SIZE_PATTERN = r"/\d+x\d+bb(-\d+)?\.(webp|jpg|jpeg|png)$"
SCREENSHOT_CANONICAL_SUFFIX = "/392x696bb.png"

# 设备类型 -> 页面中截图列表的类型名
SCREENSHOT_DEVICES = {
    "screenshots": "ScreenshotPhone",
    "ipad_screenshots": "ScreenshotPad",
    "appletv_screenshots": "ScreenshotAppleTv",
}

# CSS 选择器（按页面结构版本划分，Apple 改版时新增一个版本即可）
MARKUP_STRATEGIES = {
    # 当前 Apple 使用的 Svelte 组件结构
    "2025": {
        "rating_count": ".rating-count",
        "rating_star_totals": ".vote .total",
        "screenshot_sources": 'ul.shelf-grid__list--grid-type-{device} source[type="image/webp"]',
        "dialog": 'dialog[data-testid="dialog"]',
        "version_article": "article.svelte-13339ih",
        "version_notes": "p.svelte-13339ih",
        "version_label": "h4.svelte-13339ih",
        "version_time": "time",
        "privacy_link": 'a[data-test-id="external-link"]',
        "privacy_section": "section.purpose-section",
        "privacy_purpose": "h3",
        "privacy_category": "li.purpose-category",
        "privacy_category_title": ".category-title",
        "privacy_data_types": ".privacy-data-types li",
    },
}

PRIVACY_POLICY_LABEL = "Privacy Policy"

# 国家代码 -> App Store 店面编号
MARKETS = {
    "DZ": 143563, "AO": 143564, "AI": 143538, "AG": 143540, "AR": 143505,
    "AM": 143524, "AU": 143460, "AT": 143445, "AZ": 143568, "BH": 143559,
    "BB": 143541, "BY": 143565, "BE": 143446, "BZ": 143555, "BM": 143542,
    "BO": 143556, "BW": 143525, "BR": 143503, "VG": 143543, "BN": 143560,
    "BG": 143526, "CA": 143455, "KY": 143544, "CL": 143483, "CN": 143465,
    "CO": 143501, "CR": 143495, "CI": 143527, "HR": 143494, "CY": 143557,
    "CZ": 143489, "DK": 143458, "DM": 143545, "DO": 143508, "EC": 143509,
    "EG": 143516, "SV": 143506, "EE": 143518, "FI": 143447, "FR": 143442,
    "DE": 143443, "GH": 143573, "GR": 143448, "GD": 143546, "GT": 143504,
    "GY": 143553, "HN": 143510, "HK": 143463, "HU": 143482, "IS": 143558,
    "IN": 143467, "ID": 143476, "IE": 143449, "IL": 143491, "IT": 143450,
    "JM": 143511, "JP": 143462, "JO": 143528, "KZ": 143517, "KE": 143529,
    "KR": 143466, "KW": 143493, "LV": 143519, "LB": 143497, "LI": 143522,
    "LT": 143520, "LU": 143451, "MO": 143515, "MK": 143530, "MG": 143531,
    "MY": 143473, "MV": 143488, "ML": 143532, "MT": 143521, "MU": 143533,
    "MX": 143468, "MD": 143523, "MS": 143547, "NP": 143484, "NL": 143452,
    "NZ": 143461, "NI": 143512, "NE": 143534, "NG": 143561, "NO": 143457,
    "OM": 143562, "PK": 143477, "PA": 143485, "PY": 143513, "PE": 143507,
    "PH": 143474, "PL": 143478, "PT": 143453, "QA": 143498, "RO": 143487,
    "RU": 143469, "SA": 143479, "SN": 143535, "RS": 143500, "SG": 143464,
    "SK": 143496, "SI": 143499, "ZA": 143472, "ES": 143454, "LK": 143486,
    "KN": 143548, "LC": 143549, "VC": 143550, "SR": 143554, "SE": 143456,
    "CH": 143459, "TW": 143470, "TZ": 143572, "TH": 143475, "BS": 143539,
    "TT": 143551, "TN": 143536, "TR": 143480, "TC": 143552, "UG": 143537,
    "GB": 143444, "UA": 143492, "AE": 143481, "UY": 143514, "US": 143441,
    "UZ": 143566, "VE": 143502, "VN": 143471, "YE": 143571,
}
