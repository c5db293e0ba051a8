from .auth_controller import router as auth_router
from .user_controller import router as user_router
from .ad_controller import router as ad_router
from .comment_controller import router as comment_router


__all__ = ["auth_router", "user_router", "ad_router", "comment_router"]
