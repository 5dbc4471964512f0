"""Flask extensions shared by the app factory and the task store."""

from flask_cors import CORS
from flask_marshmallow import Marshmallow
from flask_sqlalchemy import SQLAlchemy


# Bound to the app in create_app(); db.session is scoped to the app context
db = SQLAlchemy()

ma = Marshmallow()

# Origins are read from CORS_ORIGINS when bound in create_app()
cors = CORS()
