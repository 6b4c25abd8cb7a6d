"""Police post, officer and role endpoints."""
from ..services.police import officers, posts, roles
from .base import resource_views

post_views = resource_views(posts, singular='Police post', plural='Police posts')
officer_views = resource_views(officers, singular='Police officer', plural='Police officers')
role_views = resource_views(roles, singular='Police role', plural='Police roles')
