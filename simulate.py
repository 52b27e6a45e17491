import asyncio
import httpx

BASE_URL = "http://localhost:8000"

TICKETS = [
    ("alice", "I forgot my password and I'm locked out"),
    ("bob", "How many vacation days are left in my leave balance?"),
    ("carol", "The office printer is broken again"),
    ("dave", "Application shows an error every time I save"),
    ("erin", "Where can I find the cafeteria menu?"),
    ("frank", "My computer is really slow after the software update"),
    ("grace", "Login page says incorrect credentials"),
    ("heidi", "Question about the sick leave policy"),
]

async def main():
    print(f"🚀 Submitting {len(TICKETS)} tickets one at a time...\n")
    # one submission in flight at a time, the server answers 409 otherwise
    async with httpx.AsyncClient(base_url=BASE_URL, timeout=10) as client:
        for i, (user, text) in enumerate(TICKETS):
            resp = await client.post("/ticket", json={"user": user, "text": text})
            data = resp.json()
            print(
                f"Ticket {i+1:02d} → HTTP {resp.status_code} | "
                f"{data.get('category')} ({data.get('confidence_percent')}%) | {text[:40]}"
            )

        await asyncio.sleep(2.5)
        stats = (await client.get("/stats")).json()

    print(f"\n📊 {stats['total']} tickets")
    for name, s in stats["categories"].items():
        print(f"   {name:<16} {s['count']:>3} ({s['percentage']}%)")

asyncio.run(main())
