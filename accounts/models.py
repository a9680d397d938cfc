from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Custom User model that extends the default Django User model.
    Decks are owned by a user; identity itself comes from the upstream
    identity provider.
    """

    pass
