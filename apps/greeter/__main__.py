from apps.greeter.main import run

run()
