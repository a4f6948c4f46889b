import os

from ct_browser.ui.dash_app import create_dash_app, find_free_port
from ct_browser.logging_config import configure_logging

configure_logging()

app = create_dash_app(os.getenv("CT_BROWSER_CONFIG_ROOT", "config"))
server = app.server


if __name__ == "__main__":
    port = find_free_port(int(os.getenv("PORT", "8051")))
    debug = os.getenv("DEBUG", "0") == "1"

    app.run(host="0.0.0.0", port=port, debug=debug)
