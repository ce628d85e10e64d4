# Import all models here so that Base.metadata knows about every table
from app.db.base_class import Base  # noqa: F401
from app.db.models.category import Category  # noqa: F401
from app.db.models.sub_category import SubCategory  # noqa: F401
from app.db.models.item import Item  # noqa: F401
