import streamlit as st
import requests
import os

API_BASE = f"http://{os.getenv('EMBEDLAB_API_HOST','127.0.0.1')}:{os.getenv('EMBEDLAB_API_PORT','8000')}"

st.set_page_config(page_title="Embedlab: Toy Embeddings & Search", layout="wide")
st.title("Embedlab: Toy Embeddings & Search")

st.sidebar.header("Status")
st.sidebar.write(f"API: {API_BASE}")
try:
    info = requests.get(f"{API_BASE}/info", timeout=10).json()
    st.sidebar.metric("Vocabulary", info["vocabularySize"])
    st.sidebar.metric("Dimension", info["dimension"])
    st.sidebar.write("Initialized ✅" if info["isInitialized"] else "Not initialized")
except Exception as e:
    st.sidebar.error(f"API unreachable: {e}")

def _lines(text: str) -> list[str]:
    return [ln.strip() for ln in text.splitlines() if ln.strip()]

# ---------------- Corpus ----------------
st.header("Corpus")
corpus_text = st.text_area(
    "One document per line",
    value="Machine learning is amazing\nDeep learning uses neural networks\nPython is great for AI\n"
          "Natural language processing\nالتعلم الآلي رائع\nالشبكات العصبية قوية",
    height=180,
)
dimension = st.number_input("Embedding dimension", min_value=1, max_value=2048, value=128, step=1)
if st.button("Initialize", type="primary"):
    r = requests.post(f"{API_BASE}/initialize", json={"corpus": _lines(corpus_text), "dimension": int(dimension)}, timeout=60)
    if r.status_code == 200:
        st.success(f"Initialized ✅ | {r.json()}")
    else:
        st.error(f"Initialize failed: {r.text}")

# ---------------- Search ----------------
st.divider()
st.header("Semantic Search")
query = st.text_input("Query", value="neural networks")
top_k = st.slider("Top K", min_value=1, max_value=20, value=3)
if st.button("Search") and query.strip():
    r = requests.post(f"{API_BASE}/search", json={"query": query, "documents": _lines(corpus_text), "top_k": top_k}, timeout=60)
    if r.status_code == 200:
        for hit in r.json()["results"]:
            st.write(f"**{hit['score']:.3f}** · #{hit['index']} · {hit['text']}")
    else:
        st.error(f"Search failed: {r.text}")

# ---------------- Clustering ----------------
st.divider()
st.header("Clustering")
k = st.number_input("Clusters", min_value=1, max_value=20, value=2, step=1)
if st.button("Cluster"):
    r = requests.post(f"{API_BASE}/cluster", json={"texts": _lines(corpus_text), "num_clusters": int(k)}, timeout=60)
    if r.status_code == 200:
        for idx, members in r.json()["clusters"].items():
            st.subheader(f"Cluster {idx}")
            st.write(members or "(empty)")
    else:
        st.error(f"Clustering failed: {r.text}")

# ---------------- Model ----------------
st.divider()
st.header("Model")
if st.button("Export model"):
    r = requests.get(f"{API_BASE}/model/export", timeout=60)
    st.download_button("Download model.json", data=r.text, file_name="model.json", mime="application/json")
uploaded = st.file_uploader("Import model.json", type=["json"])
if uploaded and st.button("Import"):
    r = requests.post(f"{API_BASE}/model/import", data=uploaded.getvalue(), timeout=60)
    if r.status_code == 200:
        st.success(f"Imported ✅ | {r.json()}")
    else:
        st.error(f"Import failed: {r.text}")
