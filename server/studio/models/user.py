"""Custom user model used by the `studio` Django app.

Account management is delegated: users are identified by a unique email and
carry a display name. Authentication is out of scope, so accounts are created
with unusable passwords.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Headshot studio user identified by email"""

    email = models.EmailField(
        unique=True,
        help_text="Unique contact email, also used as the username."
    )
    name = models.CharField(
        max_length=255,
        help_text="Display name."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"

    def save(self, *args, **kwargs):
        """Mirror the email into username and keep passwords unusable by default"""
        if not self.username:
            self.username = self.email
        if self._state.adding and not self.password:
            self.set_unusable_password()
        super().save(*args, **kwargs)

    def __str__(self):
        """Return a human-readable identifier for the user."""
        return self.email or self.username
