import logging
import os
from flask import Flask
from flask_cors import CORS
from country_atlas.errors import register_error_handlers
from country_atlas.rout.country_routs import country_blueprint
from country_atlas.rout.economy_routs import economy_blueprint
from country_atlas.rout.political_system_routs import political_system_blueprint
from country_atlas.rout.record_routs import record_blueprints

logging.basicConfig(
    level=os.getenv("COUNTRY_ATLAS_LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = Flask(__name__)
CORS(app)
app.register_blueprint(country_blueprint, url_prefix='/api')
app.register_blueprint(economy_blueprint, url_prefix='/api')
app.register_blueprint(political_system_blueprint, url_prefix='/api')
for blueprint in record_blueprints:
    app.register_blueprint(blueprint, url_prefix='/api')
register_error_handlers(app)

if __name__ == "__main__":
    from country_atlas.db.psql.database import engine
    from country_atlas.db.psql.models import Base

    Base.metadata.create_all(engine)
    print("Starting Country Atlas Flask Server")
    app.run(debug=True, port=int(os.getenv("COUNTRY_ATLAS_PORT", "5001")))
