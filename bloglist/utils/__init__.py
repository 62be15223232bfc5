from bloglist.utils.helpers import get_summary
from bloglist.utils.statistics import HasLikes, max_likes, most_liked

__all__ = ["HasLikes", "get_summary", "max_likes", "most_liked"]
