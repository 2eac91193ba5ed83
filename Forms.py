from flask_wtf import FlaskForm
from wtforms import IntegerField
from wtforms.validators import NumberRange, Optional

from config import GameConfig


class StrictIntegerField(IntegerField):
    """Integer field that refuses JSON floats and booleans instead of truncating them."""

    def process_formdata(self, valuelist):
        if valuelist and (isinstance(valuelist[0], bool) or not isinstance(valuelist[0], (int, str))):
            self.data = None
            raise ValueError(self.gettext("Not a valid integer value."))
        super().process_formdata(valuelist)


class GameStartForm(FlaskForm):

    class Meta:
        # JSON API, no browser session to protect
        csrf = False

    num_packs = StrictIntegerField('Number of Packs', default=GameConfig.DEFAULT_PACKS, validators=[
        Optional(),
        NumberRange(min=GameConfig.MIN_PACKS, max=GameConfig.MAX_PACKS),
    ])
    seed = StrictIntegerField('Seed', validators=[Optional()])


class RunGameForm(FlaskForm):

    class Meta:
        csrf = False

    max_turns = StrictIntegerField('Max Turns', default=GameConfig.MAX_TURNS, validators=[
        Optional(),
        NumberRange(min=1, max=GameConfig.MAX_TURNS),
    ])
