from can_i_connect import __version__
from can_i_connect.config import settings

# release version plus the commit it was built from
VERSION = f"{__version__}-{settings.GIT_HASH}"
