from optcompose import Application
from optcompose.modules import BasicOptions, ExtDBOptions
from optcompose.utils import setup_logging

setup_logging()

app = Application(
    program="db_demo",
    version="1.0",
    usage="%c %o",
    modules=[ExtDBOptions(), BasicOptions()],
)

# Try: python examples/db_demo.py --dbshow --dbname Emma --dbpasswd vrrr -dbhost 12.13.14.15
if __name__ == "__main__":
    app.exit()
