from api.app import run

run()
