import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Content-Type":"application/json"})

def healthz():   r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def facets():    r=S.get(f"{API}/facets",timeout=10); r.raise_for_status(); return r.json()
def records(**p):r=S.get(f"{API}/records",params=p,timeout=30); r.raise_for_status(); return r.json()
def record(record_id: str):
    r = S.get(f"{API}/records/{requests.utils.quote(record_id, safe='')}", timeout=20)
    r.raise_for_status()
    return r.json()

def search(q="", category="", time_period="", view="cards"):
    body = {"q": q, "category": category, "time_period": time_period, "view": view}
    r=S.post(f"{API}/search",json=body,timeout=30); r.raise_for_status(); return r.json()
