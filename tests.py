import requests
import uuid
import json
from app.config import SERVER_URL

# Manual smoke test against a running server (python run.py)
BASE_URL = f"{SERVER_URL}/v1/message"

def run_tests():
    print(f"Running tests against {BASE_URL}...")

    session = requests.Session()
    motd = f"smoke test {str(uuid.uuid4())[:8]}"

    try:
        # 1. List
        print("\n[1/5] Listing messages...")
        res = session.get(f"{BASE_URL}/")
        if res.status_code == 200:
            before = res.json()
            print(f"✅ {len(before)} messages stored")
        else:
            print(f"❌ List failed: {res.status_code} - {res.text}")
            return

        # 2. Add
        print(f"\n[2/5] Adding message: {motd}")
        res = session.post(f"{BASE_URL}/", data=json.dumps(motd))
        if res.status_code == 201:
            print("✅ Message added")
        else:
            print(f"❌ Add failed: {res.status_code} - {res.text}")
            return

        # 3. Get by index
        print(f"\n[3/5] Fetching message #{len(before)}...")
        res = session.get(f"{BASE_URL}/{len(before)}")
        if res.status_code == 200 and res.json() == motd:
            print("✅ Message stored at the end of the list")
        else:
            print(f"❌ Fetch failed: {res.status_code} - {res.text}")

        # 4. Random
        print("\n[4/5] Fetching a random message...")
        res = session.get(f"{BASE_URL}/random")
        if res.status_code == 200 and res.json() in before + [motd]:
            print(f"✅ Got: {res.json()}")
        else:
            print(f"❌ Random failed: {res.status_code} - {res.text}")

        # 5. Bad input
        print("\n[5/5] Posting an unquoted body...")
        res = session.post(f"{BASE_URL}/", data="not json")
        if res.status_code == 400:
            print("✅ Rejected with 400")
        else:
            print(f"❌ Expected 400, got {res.status_code}")

        print("\n✨ All tests completed!")

    except requests.exceptions.ConnectionError:
        print(f"\n❌ Could not connect to server at {BASE_URL}")
        print("   Make sure the server is running (python run.py)")

if __name__ == "__main__":
    run_tests()
