"""Flask extensions initialization."""

from flask_cors import CORS
from flask_marshmallow import Marshmallow
from flask_sqlalchemy import SQLAlchemy
from flask_talisman import Talisman


# SQLAlchemy database instance
db = SQLAlchemy()

# Marshmallow serialization instance
ma = Marshmallow()

# Cross-origin resource sharing
cors = CORS()

# Security response headers
talisman = Talisman()
