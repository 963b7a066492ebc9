# import all models for Alembic
from resource_hub.db.models.user import User, Role
from resource_hub.db.models.category import Category
from resource_hub.db.models.resource import Resource
from resource_hub.db.models.content_block import ContentBlock, BlockType
from resource_hub.db.models.theme_settings import ThemeSettings
