from roblox_status.main import run

run()
