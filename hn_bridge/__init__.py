from .results import FetchError, FetchResult
from .stories import get_raw_best_stories, get_titles
from .interop import HostFatalError, get_hacker_news, get_hacker_news_raw
