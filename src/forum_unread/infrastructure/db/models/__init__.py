from forum_unread.infrastructure.db.models.reply import ReplyModel
from forum_unread.infrastructure.db.models.topic import TopicModel
from forum_unread.infrastructure.db.models.user_meta import UserMetaModel

__all__ = ["ReplyModel", "TopicModel", "UserMetaModel"]
