"""Create all standard extensions."""
from flask_wtf.csrf import CSRFProtect

__all__ = ("csrf",)

#: installed by the application when ``WTF_CSRF_ENABLED`` is set
csrf = CSRFProtect()
