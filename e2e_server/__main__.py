from e2e_server.server import run

run()
