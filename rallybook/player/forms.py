"""Forms for the player package."""

from wtforms import Form, SelectField, StringField, TextAreaField

from rallybook.core import validators as rules
from rallybook.core.forms import enum_choices, enum_coercer, raise_for

from .models import PlayerSubmission, SkillLevel, SkillStrength


class PlayerForm(Form):
    """Form for adding or editing a player profile."""

    nickname = StringField("Nickname")
    full_name = StringField("Full Name")
    contact_number = StringField("Contact Number")
    email = StringField("Email")
    address = StringField("Address")
    remarks = TextAreaField("Remarks")
    min_level = SelectField(
        "Minimum Level",
        choices=enum_choices(SkillLevel),
        coerce=enum_coercer(SkillLevel),
        default=SkillLevel.BEGINNER,
    )
    min_strength = SelectField(
        "Minimum Strength",
        choices=enum_choices(SkillStrength),
        coerce=enum_coercer(SkillStrength),
        default=SkillStrength.WEAK,
    )
    max_level = SelectField(
        "Maximum Level",
        choices=enum_choices(SkillLevel),
        coerce=enum_coercer(SkillLevel),
        default=SkillLevel.BEGINNER,
    )
    max_strength = SelectField(
        "Maximum Strength",
        choices=enum_choices(SkillStrength),
        coerce=enum_coercer(SkillStrength),
        default=SkillStrength.STRONG,
    )

    def validate_nickname(self, field):
        raise_for(rules.validate_nickname(field.data))

    def validate_full_name(self, field):
        raise_for(rules.validate_full_name(field.data))

    def validate_contact_number(self, field):
        raise_for(rules.validate_phone(field.data))

    def validate_email(self, field):
        raise_for(rules.validate_email(field.data))

    def validate_address(self, field):
        raise_for(rules.validate_address(field.data))

    def validate(self, extra_validators=None):
        """Validate the fields, then the skill range across them."""
        if not super().validate(extra_validators=extra_validators):
            return False

        range_error = rules.validate_level_range(
            self.min_level.data,
            self.min_strength.data,
            self.max_level.data,
            self.max_strength.data,
        )
        if range_error:
            self.max_level.errors.append(range_error)
            return False
        return True

    def to_submission(self) -> PlayerSubmission:
        """Build the service input from validated form data."""
        return PlayerSubmission(
            nickname=self.nickname.data or "",
            full_name=self.full_name.data or "",
            contact_number=self.contact_number.data or "",
            email=self.email.data or "",
            address=self.address.data or "",
            remarks=self.remarks.data or "",
            min_level=self.min_level.data,
            min_strength=self.min_strength.data,
            max_level=self.max_level.data,
            max_strength=self.max_strength.data,
        )
