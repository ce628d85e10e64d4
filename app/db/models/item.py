from sqlalchemy import Column, ForeignKey, String, Boolean, Float
from sqlalchemy.orm import relationship
from app.db.base_class import AuditMixin, Base, IdentityMixin

class Item(Base, IdentityMixin, AuditMixin):
	__tablename__ = "items"

	name = Column(String, nullable=False, index=True)
	image = Column(String, nullable=False)
	description = Column(String, nullable=False)
	tax_applicable = Column(Boolean, nullable=True)
	tax = Column(Float, nullable=True)
	base_amount = Column(Float, nullable=False)
	discount = Column(Float, nullable=True, default=0)
	total_amount = Column(Float, nullable=False)

	sub_category_id = Column(
		String(36),
		ForeignKey("sub_categories.id", ondelete="SET NULL", onupdate="CASCADE"),
		nullable=True,
		index=True,
	)
	category_id = Column(
		String(36),
		ForeignKey("categories.id", ondelete="SET NULL", onupdate="CASCADE"),
		nullable=True,
		index=True,
	)

	sub_category = relationship("SubCategory", back_populates="items")
	category = relationship("Category", back_populates="items")
