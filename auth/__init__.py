from .router import router
from .service import check_app_password

__all__ = ['router', 'check_app_password']
