"""Request controllers."""

from .login import LoginController
from .signup import SignUpController

__all__ = ["LoginController", "SignUpController"]
