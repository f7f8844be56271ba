# tests/errors/test_base_error.py
"""
BaseError Tests - field resolution, naming, stringification, origin capture

Instances resolve message/status/code from the explicit arguments first, then
from the variant's class-level descriptor, then from library defaults.
"""

import copy
import pickle
from pathlib import Path

import pytest

from faultkit import BaseError, ErrorDescriptor, ErrorOptions


THIS_FILE = Path(__file__).resolve()


class UserNotFound(BaseError):
    message = "Unable to find user"
    status = 404
    code = "E_USER_NOT_FOUND"
    help = "Make sure the user exists in the table"


class MessageOnly(BaseError):
    message = "Unable to find user"


class TestFieldResolution:
    """Explicit values > descriptor > defaults"""

    def test_base_error_without_arguments(self):
        """Bare BaseError has an empty message, status 500 and no code"""
        error = BaseError()

        assert error.message == ""
        assert error.status == 500
        assert error.code is None
        assert "code" not in vars(error)
        assert error.help is None
        assert "help" not in vars(error)
        assert error.cause is None

    def test_explicit_code(self):
        error = BaseError("Some message", code="E_SOME_MESSAGE")

        assert error.message == "Some message"
        assert error.status == 500
        assert error.code == "E_SOME_MESSAGE"

    def test_explicit_status(self):
        error = BaseError("Some message", code="E_SOME_MESSAGE", status=401)

        assert error.status == 401
        assert error.code == "E_SOME_MESSAGE"

    def test_descriptor_defaults(self):
        """new V() takes every field from the descriptor"""
        error = UserNotFound()

        assert error.message == "Unable to find user"
        assert error.status == 404
        assert error.code == "E_USER_NOT_FOUND"
        assert error.help == "Make sure the user exists in the table"

    def test_explicit_values_override_descriptor(self):
        error = UserNotFound("Custom message", code="E_OTHER", status=410)

        assert error.message == "Custom message"
        assert error.status == 410
        assert error.code == "E_OTHER"
        # help has no per-instance override
        assert error.help == UserNotFound.help

    def test_partial_descriptor(self):
        error = MessageOnly()

        assert error.message == "Unable to find user"
        assert error.status == 500
        assert "code" not in vars(error)
        assert "help" not in vars(error)

    def test_descriptor_message_stored_verbatim(self):
        class Templated(BaseError):
            message = "Unable to find %s"

        assert Templated().message == "Unable to find %s"

    def test_descriptor_inherited_by_subclasses(self):
        class AdminNotFound(UserNotFound):
            status = 403

        error = AdminNotFound()
        assert error.message == "Unable to find user"
        assert error.status == 403
        assert error.code == "E_USER_NOT_FOUND"

    def test_options_bundle(self):
        """Options can be collected up front and forwarded"""
        options: ErrorOptions = {"code": "E_FORWARDED", "status": 409}

        error = BaseError("Conflict", **options)

        assert error.code == "E_FORWARDED"
        assert error.status == 409

    def test_descriptor_record(self):
        assert UserNotFound.descriptor() == ErrorDescriptor(
            message="Unable to find user",
            code="E_USER_NOT_FOUND",
            status=404,
            help="Make sure the user exists in the table",
        )
        assert BaseError.descriptor() == ErrorDescriptor()

    def test_is_an_exception(self):
        with pytest.raises(UserNotFound) as exc_info:
            raise UserNotFound()

        assert isinstance(exc_info.value, BaseError)
        assert isinstance(exc_info.value, Exception)
        assert exc_info.value.args == ("Unable to find user",)


class TestCause:
    def test_cause_is_kept_unchanged(self):
        root = ValueError("foo")
        error = MessageOnly(cause=root)

        assert error.cause is root
        assert error.__cause__ is root
        assert error.message == "Unable to find user"

    def test_cause_appears_in_raise_chain(self):
        root = KeyError("id")

        with pytest.raises(UserNotFound) as exc_info:
            raise UserNotFound(cause=root)

        assert exc_info.value.__cause__ is root


class TestNaming:
    def test_name_is_most_derived_class(self):
        assert BaseError().name == "BaseError"
        assert UserNotFound().name == "UserNotFound"

        class AdminNotFound(UserNotFound):
            pass

        assert AdminNotFound().name == "AdminNotFound"

    def test_explicit_variant_name(self):
        class Internal(BaseError):
            variant_name = "StorageUnavailable"

        class Child(Internal):
            pass

        assert Internal().name == "StorageUnavailable"
        # explicit names are not inherited
        assert Child().name == "Child"


class TestStringify:
    def test_without_code(self):
        assert str(MessageOnly()) == "MessageOnly: Unable to find user"

    def test_with_code(self):
        error = MessageOnly(code="E_USER_NOT_FOUND")
        assert str(error) == "MessageOnly [E_USER_NOT_FOUND]: Unable to find user"

    def test_empty_message(self):
        assert str(BaseError()) == "BaseError: "
        assert str(BaseError(code="E_X")) == "BaseError [E_X]: "

    def test_repr_reports_variant_name(self):
        assert repr(UserNotFound()) == "UserNotFound('Unable to find user')"


class TestImmutability:
    def test_instance_fields_are_read_only(self):
        error = UserNotFound()

        for field in ("name", "message", "status", "code", "help", "cause", "origin"):
            with pytest.raises(AttributeError):
                setattr(error, field, "changed")

        with pytest.raises(AttributeError):
            del error.message

        assert error.message == "Unable to find user"

    def test_exception_machinery_still_works(self):
        error = UserNotFound()
        error.add_note("while loading profile")

        try:
            raise error
        except UserNotFound as caught:
            assert caught.__traceback__ is not None
            assert caught.__notes__ == ["while loading profile"]

    def test_descriptor_fields_are_read_only(self):
        for field in ("message", "code", "status", "help", "variant_name"):
            with pytest.raises(AttributeError):
                setattr(UserNotFound, field, "changed")

        with pytest.raises(AttributeError):
            del UserNotFound.status

        assert UserNotFound.status == 404


class TestOrigin:
    """The captured origin points at the construction site, not at BaseError"""

    def test_origin_points_to_caller(self):
        error = BaseError("Some message")

        assert Path(error.origin[-1].filename).resolve() == THIS_FILE
        assert error.origin[-1].name == "test_origin_points_to_caller"

    def test_origin_with_subclass(self):
        try:
            raise UserNotFound(UserNotFound.message)
        except UserNotFound as error:
            assert Path(error.origin[-1].filename).resolve() == THIS_FILE

    def test_origin_skips_subclass_init(self):
        class LookupFailed(BaseError):
            def __init__(self, key):
                super().__init__(f"Unable to find {key}")

        error = LookupFailed("user")

        assert error.message == "Unable to find user"
        assert error.origin[-1].name == "test_origin_skips_subclass_init"

    def test_stack_rendering(self):
        error = MessageOnly()
        lines = error.stack.splitlines()

        assert lines[0] == "MessageOnly: Unable to find user"
        assert THIS_FILE.name in lines[1]
        assert "test_stack_rendering" in lines[1]

    def test_stack_header_without_message(self):
        assert BaseError().stack.splitlines()[0] == "BaseError"


class RateLimited(BaseError):
    code = "E_RATE_LIMITED"

    def __init__(self, retry_after):
        super().__init__(f"Retry after {retry_after}s")
        # derived after the base constructor has resolved the defaults
        self.status = 429 if retry_after else 503


class TestSubclassInit:
    def test_fields_can_be_derived_in_subclass_init(self):
        error = RateLimited(30)

        assert error.status == 429
        assert RateLimited(0).status == 503
        assert error.origin[-1].name == "test_fields_can_be_derived_in_subclass_init"

    def test_sealed_after_subclass_init(self):
        error = RateLimited(30)

        with pytest.raises(AttributeError):
            error.status = 500


class TestCopy:
    """Copies keep resolved fields and stay sealed"""

    def assert_same_fields(self, original, clone):
        assert type(clone) is type(original)
        assert clone.name == original.name
        assert clone.message == original.message
        assert clone.status == original.status
        assert clone.code == original.code
        assert clone.help == original.help
        assert clone.args == original.args
        assert [f.name for f in clone.origin] == [f.name for f in original.origin]

    def test_copy(self):
        error = UserNotFound()
        clone = copy.copy(error)

        self.assert_same_fields(error, clone)
        with pytest.raises(AttributeError):
            clone.message = "changed"

    def test_deepcopy_keeps_cause(self):
        error = UserNotFound(cause=ValueError("foo"))
        clone = copy.deepcopy(error)

        self.assert_same_fields(error, clone)
        assert isinstance(clone.cause, ValueError)
        assert clone.__cause__ is clone.cause
        assert "code" in vars(clone)
        assert "help" in vars(clone)

    def test_copy_keeps_absent_fields_absent(self):
        clone = copy.copy(MessageOnly())

        assert "code" not in vars(clone)
        assert clone.code is None

    def test_pickle_round_trip(self):
        error = UserNotFound("Unable to find user 42", cause=KeyError("id"))
        clone = pickle.loads(pickle.dumps(error))

        self.assert_same_fields(error, clone)
        assert isinstance(clone.__cause__, KeyError)
        assert clone.stack.splitlines()[0] == "UserNotFound: Unable to find user 42"
