import subprocess, sys, time, random, requests, logging
from concurrent.futures import ThreadPoolExecutor

logging.getLogger("urllib3").setLevel(logging.ERROR)

url = "http://127.0.0.1:8080/value"

def spawn():
    return subprocess.Popen([sys.executable, "-m", "value_api"])

def wait_ready(timeout=10):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            requests.get(url, timeout=1)
            return True
        except requests.RequestException:
            time.sleep(0.1)
    return False

def get_value():
    r = requests.get(url)
    r.raise_for_status()
    return int(r.text)

def post_value(body):
    return requests.post(url, data=str(body)).status_code

def check_round_trip(value):
    return post_value(value) == 200 and get_value() == value

def check_rejected(body, method="POST", expected_status=400):
    before = get_value()
    status = requests.request(method, url, data=body).status_code
    return status == expected_status and get_value() == before

def check_concurrent(num_writers):
    values = random.sample(range(-10**6, 10**6), num_writers)
    with ThreadPoolExecutor(max_workers=num_writers) as pool:
        statuses = list(pool.map(post_value, values))
    observed = get_value()
    return all(s == 200 for s in statuses) and observed in values, observed

def main():
    num_writers = int(sys.argv[1]) if len(sys.argv) >= 2 else 8
    proc = spawn()
    try:
        if not wait_ready():
            print("Server did not come up.")
            return 1
        results = {
            "round trip":   check_round_trip(42),
            "negative":     check_round_trip(-7),
            "non-integer":  check_rejected("abc"),
            "empty body":   check_rejected(""),
            "PUT":          check_rejected("1", method="PUT", expected_status=405),
        }
        ok, observed = check_concurrent(num_writers)
        results["concurrent"] = ok
        for name, passed in results.items():
            print(f"{name:<12} {'ok' if passed else 'FAILED'}")
        print(f"Writers:    {num_writers}")
        print(f"Observed:   {observed}")
        passed = all(results.values())
        print("Passed!" if passed else "FAILED!")
        return 0 if passed else 1
    finally:
        # clean up
        proc.terminate()
        proc.wait()

if __name__ == "__main__":
    sys.exit(main())
