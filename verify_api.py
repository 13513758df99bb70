import requests
import json

BASE_URL = "http://localhost:8000/ezelectronics"
USERNAME = "verify_customer"
PASSWORD = "SecurePassword123!"
MODEL = "iPhone13"

def print_response(name, response):
    print(f"--- {name} ---")
    print(f"Status: {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)
    print("\n")

def run_verification():
    session = requests.Session()

    # 1. Register
    print("1. Registering customer...")
    resp = session.post(f"{BASE_URL}/users", json={
        "username": USERNAME,
        "name": "Verify",
        "surname": "Customer",
        "password": PASSWORD,
        "role": "Customer"
    })
    print_response("Register", resp)

    # 2. Login (session cookie kept by requests.Session)
    print("2. Logging in...")
    resp = session.post(f"{BASE_URL}/sessions", json={
        "username": USERNAME,
        "password": PASSWORD
    })
    print_response("Login", resp)
    if resp.status_code != 200:
        print("Login failed, aborting.")
        return

    # 3. Add a seeded product
    print("3. Adding product to cart...")
    resp = session.post(f"{BASE_URL}/carts", json={"model": MODEL})
    print_response("Add To Cart", resp)

    # 4. Current cart
    resp = session.get(f"{BASE_URL}/carts")
    print_response("Current Cart", resp)

    # 5. Checkout
    print("5. Checking out...")
    resp = session.patch(f"{BASE_URL}/carts")
    print_response("Checkout", resp)

    # 6. History
    resp = session.get(f"{BASE_URL}/carts/history")
    print_response("History", resp)

    # 7. Admin-only listing (Expected Failure for a customer)
    print("7. Listing all carts as customer (Expected 401)...")
    resp = session.get(f"{BASE_URL}/carts/all")
    print_response("All Carts (Customer)", resp)

    # 8. Logout
    resp = session.delete(f"{BASE_URL}/sessions/current")
    print_response("Logout", resp)

if __name__ == "__main__":
    run_verification()
