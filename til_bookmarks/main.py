import argparse
import logging

from . import create_app
from .config import Config

def main():
    parser = argparse.ArgumentParser(description='TIL Bookmarks API')
    parser.add_argument('--debug', action='store_true', help='Run in debug mode')
    parser.add_argument('--port', type=int, default=5000, help='Port to run the server on')
    parser.add_argument('--db', help='Path of the SQLite bookmark store (default: $BOOKMARKS_DB or bookmarks.db)')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    overrides = {'DATABASE_PATH': args.db} if args.db else None
    app = create_app(Config, overrides)
    app.run(debug=args.debug, port=args.port, threaded=True)

if __name__ == '__main__':
    main()
