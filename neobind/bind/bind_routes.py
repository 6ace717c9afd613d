# neobind/bind/bind_routes.py
from flask import Blueprint, current_app, render_template, request

bind_bp = Blueprint("bind", __name__)


@bind_bp.get("/bind")
def bind_form():
    return render_template("bind.html")


@bind_bp.post("/bind")
def bind():
    # neo address and sign text arrive on the query string, eth address in the form body
    neo_address = request.args.get("neoAddress", "")
    sign_text = request.args.get("signText", "")
    eth_address = request.form.get("ethAddress", "")
    print(f"[Bind] neo={neo_address} eth={eth_address} sign={sign_text}")

    verifier = current_app.extensions["neobind.verifier"]
    if not verifier.verify(neo_address, eth_address, sign_text):
        message = f"Sign text for {neo_address} could not be verified. Nothing was bound."
        return render_template("bind.html", message=message)

    current_app.extensions["neobind.store"].append(neo_address, eth_address, sign_text)
    message = (
        f"Bind Success! Neo Address: {neo_address}, "
        f"Ethereum Address: {eth_address}, Sign Text: {sign_text}"
    )
    return render_template("bind.html", message=message)
