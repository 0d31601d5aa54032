import functools
import inspect
from inspect import Parameter, Signature
import os


class TypeCheck(object):
    """Class-based decorator to optionally check the argument and return
    types of a function against its annotations.

    Supported annotations:
    - types
    - strings
        - The string is evaluated with the globals of the decorated function
          and the bound arguments as locals. It must evaluate to a boolean
          (the result of the check), a type, or a tuple of types and strings.
    - tuples of types and strings, which pass if any member passes

    Checks run when python runs with __debug__ set and the environment
    variable DISABLE_TYPECHECKING is not defined. Passing force=True always
    enables them.

    With arithmetic=True, a failed argument check returns NotImplemented
    instead of raising, which is what binary operators such as __add__ need
    so python can try the reflected operation. This also forces checking.

    Keyword-only, *args and **kwargs annotations are not supported.
    """

    def __init__(self, force=False, arithmetic=False):
        """ Constructor of the typecheck decorator.
        args:
            force (boolean): Typecheck even if python was not run in debug mode.
            arithmetic (boolean): Return NotImplemented on a failed argument
                check instead of raising an AssertionError.
        """
        self._arithmetic = arithmetic

        self._check_types = force or arithmetic
        if "DISABLE_TYPECHECKING" not in os.environ:
            self._check_types = self._check_types or __debug__

    def _check_complex_annotation(self, name, value, annotation, local_dict):
        """ Evaluate a string constraint as if it were in the body of the
        decorated function.

        outputs:
            Returns a boolean value representing the result of this check.
        """
        assert isinstance(annotation, str)
        try:
            t_eval = eval(annotation, self._func.__globals__, dict(local_dict))
        except Exception as e:
            raise AssertionError(
                f"Evaluating string annotation {{{annotation}}} "
                f"raised the exception: {e}"
            )

        if isinstance(t_eval, bool):
            return t_eval
        elif isinstance(t_eval, type):
            return isinstance(value, t_eval)
        elif isinstance(t_eval, tuple):
            return self._validate_argument(name, value, t_eval, local_dict)

        return False

    def _validate_argument(self, name, value, annotation, local_dict=None):
        """ Validate the type constraint for a single name, value, annotation
        triple. Raise an assertion if the argument fails validation.
        """
        if annotation in (Parameter.empty, Signature.empty):
            return True

        if local_dict is None:
            local_dict = {}

        if isinstance(annotation, tuple):
            simple_annotations = tuple(a for a in annotation if isinstance(a, type))
            complex_annotations = [a for a in annotation if isinstance(a, str)]
        elif isinstance(annotation, type):
            simple_annotations = annotation
            complex_annotations = []
        else:
            simple_annotations = tuple()
            complex_annotations = [annotation]

        simple_valid = isinstance(value, simple_annotations)
        complex_valid = any(
            [
                self._check_complex_annotation(name, value, c, local_dict)
                for c in complex_annotations
            ]
        )

        assert simple_valid or complex_valid, (
            f"Expected {name} to be of type {annotation}, "
            f"but found ({value}) of type ({type(value)})"
        )

        return True

    def _validate_annotation(self, annotation):
        """ An annotation must be absent, a type, a string, or a tuple of
        types and strings.
        """
        if annotation in (Parameter.empty, Signature.empty):
            return True
        elif isinstance(annotation, (type, str)):
            return True
        elif isinstance(annotation, tuple):
            return all([self._validate_annotation(a) for a in annotation])

        return False

    def _validate_defaults(self):
        defaults = self._signature.bind_partial()
        defaults.apply_defaults()
        for parameter_name, parameter in self._signature.parameters.items():
            if Parameter.empty in (parameter.default, parameter.annotation):
                continue

            self._validate_argument(
                parameter_name,
                parameter.default,
                parameter.annotation,
                defaults.arguments,
            )

    def _validate_annotations(self):
        for parameter_name, parameter in self._signature.parameters.items():
            assert self._validate_annotation(parameter.annotation), (
                f"Type annotation for {parameter_name} must be a string, type, "
                f"or a tuple of strings and types ({parameter})"
            )

        assert self._validate_annotation(self._signature.return_annotation), (
            f"Return type annotations must be strings, types, or tuples "
            f"of strings or types ({self._signature.return_annotation})"
        )

        self._validate_defaults()

    def _check_function_args(self, bound):
        for arg_name, arg_value in bound.arguments.items():
            arg_annotation = self._signature.parameters[arg_name].annotation
            self._validate_argument(
                arg_name, arg_value, arg_annotation, bound.arguments
            )

    def _wrap_func(self, func):
        self._func = func
        self._signature = inspect.signature(func)
        self._annotations_checked = False

        @functools.wraps(func)
        def checked_wrapper(*args, **kwargs):
            if not self._annotations_checked:
                self._validate_annotations()
                self._annotations_checked = True

            bound = self._signature.bind(*args, **kwargs)
            bound.apply_defaults()

            try:
                self._check_function_args(bound)
            except AssertionError:
                if self._arithmetic:
                    return NotImplemented
                raise

            return_value = self._func(*args, **kwargs)
            self._validate_argument(
                "return value", return_value, self._signature.return_annotation
            )

            return return_value

        return checked_wrapper

    def __call__(self, func):
        """ Add type checking to the function if enabled.

        outputs:
            Returns a version of the passed function with type checking if enabled.
        """
        if self._check_types:
            return self._wrap_func(func)

        return func
