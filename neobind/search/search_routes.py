# neobind/search/search_routes.py
from flask import Blueprint, current_app, render_template, request

search_bp = Blueprint("search", __name__)

FOUND_MESSAGE = "Your Bind Ethereum Address Is: {}"
NOT_FOUND_MESSAGE = "No Ethereum Address Binded To This Neo Address."


@search_bp.get("/search")
def search_form():
    return render_template("search.html")


@search_bp.post("/search")
def search():
    neo_address = request.form.get("neoAddress", "")
    eth_address = current_app.extensions["neobind.store"].search(neo_address)
    print(f"[Search] neo={neo_address} -> {eth_address}")

    if eth_address is None:
        message = NOT_FOUND_MESSAGE
    else:
        message = FOUND_MESSAGE.format(eth_address)
    return render_template("search.html", message=message)
