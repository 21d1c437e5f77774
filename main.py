import argparse
import logging

from parking_violations.web.app import create_app

LOGGING_LEVELS = {'critical': logging.CRITICAL,
                  'error': logging.ERROR,
                  'warning': logging.WARNING,
                  'info': logging.INFO,
                  'debug': logging.DEBUG}

LOG = logging.getLogger(__name__)

def run(host: str, port: int, debug: bool):
    app = create_app()

    LOG.info(f'Serving on {host}:{port}')

    app.run(host=host, port=port, debug=debug)

def parse_args():
    parser = argparse.ArgumentParser(
        description='Run the NYC parking violation search server')
    parser.add_argument(
        '-l',
        '--log-level',
        help='Log level')
    parser.add_argument(
        '-f',
        '--log-file',
        help='Log file name')
    parser.add_argument(
        '--host',
        default='127.0.0.1',
        help='Interface to bind')
    parser.add_argument(
        '-p',
        '--port',
        default=5000,
        type=int,
        help='Port to listen on')
    parser.add_argument(
        '-d',
        '--debug',
        action='store_true',
        help='Run with the Flask debugger')
    return parser.parse_args()

if __name__ == '__main__':
    args = parse_args()

    logging_level: int = LOGGING_LEVELS.get(
        args.log_level, logging.NOTSET)
    logging.basicConfig(level=logging_level, filename=args.log_file,
                        format='%(asctime)s %(levelname)s: %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')

    run(host=args.host, port=args.port, debug=args.debug)
