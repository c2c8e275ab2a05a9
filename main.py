import sys

from nsgc.util.logger import log
from nsgc.util.server import Server

if __name__ == '__main__':
    exit_code = 0
    try:
        server = Server()
        server.run()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        log(f'Fatal: {e}', "FATAL")
        exit_code = 1
    sys.exit(exit_code)
