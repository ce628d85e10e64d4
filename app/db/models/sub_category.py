from sqlalchemy import Column, String, Boolean, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base_class import AuditMixin, Base, IdentityMixin

class SubCategory(Base, IdentityMixin, AuditMixin):
	__tablename__ = "sub_categories"

	name = Column(String, nullable=False, index=True)
	image = Column(String, nullable=False)
	description = Column(String, nullable=False)
	tax_applicable = Column(Boolean, nullable=True, default=False)
	tax = Column(Float, nullable=True)

	category_id = Column(
		String(36),
		ForeignKey("categories.id", ondelete="RESTRICT", onupdate="CASCADE"),
		nullable=False,
		index=True,
	)

	category = relationship("Category", back_populates="sub_categories")
	items = relationship("Item", back_populates="sub_category", passive_deletes=True)
