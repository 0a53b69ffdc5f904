from documents_api.main import run

run()
