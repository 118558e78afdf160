from proverbs.app_factory import run

run()
