from availabilityio.main import run

run()
