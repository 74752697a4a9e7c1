# src/sungka/api/routes.py
from flask import current_app
from flask_smorest import Blueprint, abort
from marshmallow import Schema, fields, validate, EXCLUDE
from sungka.engine.core import NUM_PITS, new_game, step, legal_actions
from sungka.io.registry import choose_move

bp = Blueprint("sungka", __name__, url_prefix="/api")
bot_bp = Blueprint("sungka_bot", __name__)

# ---------- Schemas ----------
def _Count():
    return fields.Integer(strict=True, validate=validate.Range(min=0))

class BoardSchema(Schema):
    class Meta: unknown = EXCLUDE
    pits = fields.List(
        fields.List(_Count(), validate=validate.Length(equal=NUM_PITS)),
        required=True, validate=validate.Length(equal=2),
    )
    stores = fields.List(_Count(), required=True, validate=validate.Length(equal=2))

class StateSchema(BoardSchema):
    current_player = fields.Integer(required=True, validate=validate.OneOf([0, 1]))

class BotReqSchema(BoardSchema):
    player = fields.Integer(required=True, validate=validate.OneOf([0, 1]))
    level  = fields.String(load_default="easy", allow_none=True)   # unknown or null levels play as easy

class BotRespSchema(Schema):
    move = fields.Integer()

class ApplyReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    state  = fields.Nested(StateSchema, required=True)
    action = fields.Integer(load_default=None)

class ApplyRespSchema(Schema):
    action     = fields.Integer(allow_none=True)
    next_state = fields.Nested(StateSchema)
    reward     = fields.Float()
    done       = fields.Boolean()
# -----------------------------

def _bot_move(req):
    state = {"pits": req["pits"], "stores": req["stores"], "current_player": req["player"]}
    move = choose_move(state, req["player"], req.get("level"),
                       depth=current_app.config["HARD_DEPTH"])
    return {"move": move}

@bot_bp.route("/sungka-bot", methods=["POST"])
@bot_bp.arguments(BotReqSchema)
@bot_bp.response(200, BotRespSchema)
def sungka_bot(req):
    return _bot_move(req)

@bp.route("/move", methods=["POST"])   # AI move
@bp.arguments(BotReqSchema)
@bp.response(200, BotRespSchema)
def move(req):
    return _bot_move(req)

@bp.route("/health")
@bp.response(200, Schema.from_dict({"status": fields.String(), "hard_depth": fields.Integer()}, name="Health")())
def health():
    return {"status": "ok", "hard_depth": current_app.config["HARD_DEPTH"]}

@bp.route("/newgame", methods=["POST"])
@bp.response(200, Schema.from_dict({"state": fields.Nested(StateSchema)}, name="NewGame")())
def newgame():
    return {"state": new_game()}

@bp.route("/apply", methods=["POST"])  # human move
@bp.arguments(ApplyReqSchema)
@bp.response(200, ApplyRespSchema)
def apply(req):
    a = req.get("action")
    acts = legal_actions(req["state"])
    if a is None or a not in acts:
        abort(400, message=f"Illegal or missing action. Legal: {acts}")
    ns, rew, done = step(req["state"], a)
    return {"action": a, "next_state": ns, "reward": rew, "done": done}
