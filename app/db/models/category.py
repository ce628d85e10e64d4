from sqlalchemy import Column, String, Boolean, Float
from sqlalchemy.orm import relationship
from app.db.base_class import AuditMixin, Base, IdentityMixin

class Category(Base, IdentityMixin, AuditMixin):
	__tablename__ = "categories"

	name = Column(String, nullable=False, index=True)
	image = Column(String, nullable=False)
	description = Column(String, nullable=False)
	tax_applicable = Column(Boolean, nullable=False)
	tax = Column(Float, nullable=True)
	tax_type = Column(String, nullable=True)

	# Deletion is restricted while subcategories exist; items are detached by the database
	sub_categories = relationship("SubCategory", back_populates="category", passive_deletes="all")
	items = relationship("Item", back_populates="category", passive_deletes=True)
