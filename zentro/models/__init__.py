# Import all models so they're registered with Base.metadata
from zentro.models.admin_user import AdminUser
from zentro.models.contact_inquiry import ContactInquiry
from zentro.models.property import Property
from zentro.models.property_images import PropertyImage

__all__ = [
    "AdminUser",
    "ContactInquiry",
    "Property",
    "PropertyImage",
]
