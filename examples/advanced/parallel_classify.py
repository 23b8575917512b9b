"""Thread safe: classify 1000 snippets in parallel."""

from concurrent.futures import ThreadPoolExecutor

from spanlex import classify

snippets = [f"const item{i} = fetch('/api/{i}'); // request {i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(classify, snippets))

print(f"Classified {len(results)} snippets in parallel")
print("First snippet spans:", len(results[0][0]))
print("Last snippet spans:", len(results[-1][0]))
