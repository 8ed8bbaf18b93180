"""Terminal version of the store manager inventory form."""
import json
import logging
import traceback
from termcolor import colored
from dotenv import load_dotenv
from rxform.handlers import FormState, make_numeric_handler, make_phone_handler
from rxform.utils.config_loader import ConfigLoader
from rxform.utils.logging_utils import setup_logging
from rxform.utils.state_paths import get_in, set_in
from rxform.utils.validation import get_preset, to_number

logger = logging.getLogger(__name__)


def field_options(field):
    """Resolve the validation options of a numeric field definition."""
    options = get_preset(field["preset"])
    overrides = field.get("overrides")
    if overrides:
        options = options.with_overrides(**overrides)
    return options


def build_handlers(fields, form):
    """Create one change handler per field, all writing into ``form``.

    Args:
        fields (list): Field definitions (see ``INPUT_FIELDS``).
        form (FormState): State holder the handlers update.

    Returns:
        dict: Field path to handler.
    """
    handlers = {}
    for field in fields:
        if field["kind"] == "numeric":
            handlers[field["path"]] = make_numeric_handler(form.set_state, field["path"], field_options(field))
        elif field["kind"] == "phone":
            handlers[field["path"]] = make_phone_handler(form.set_state, field["path"])
        else:
            raise ValueError(f"Unknown field kind {field['kind']!r} for {field['path']}")
    return handlers


def build_payload(state, fields):
    """Convert sanitized form state into the values the form would submit.

    Numeric fields become numbers (0 when empty or partial); phone numbers
    stay strings.
    """
    payload = {}
    for field in fields:
        value = get_in(state, field["path"], "")
        if field["kind"] == "numeric":
            value = to_number(value, field_options(field))
        payload = set_in(payload, field["path"], value)
    return payload


def fill_form(fields, handlers, form):
    """Prompt for every field once, pushing each entry through its handler."""
    for field in fields:
        path = field["path"]
        raw_value = input(colored(f"{field['prompt']}: ", "cyan"))
        handlers[path](raw_value)
        cleaned = get_in(form.value, path, "")
        logger.debug(f"{path}: {raw_value!r} -> {cleaned!r}")
        if cleaned != raw_value:
            print(colored(f"  -> {cleaned or '(empty)'}", "yellow"))


def main():
    """Main function to run the inventory form."""
    load_dotenv()
    setup_logging()

    config = ConfigLoader().get_config()
    fields = config["INPUT_FIELDS"]

    print(colored("\n💊 Add medicine to inventory", "blue"))
    print("Type values as you would in the web form; invalid characters are dropped.")
    print("-" * 60)

    try:
        while True:
            form = FormState({})
            handlers = build_handlers(fields, form)
            fill_form(fields, handlers, form)

            logger.info(f"Form completed with {len(form.history) - 1} updates")
            print(colored("\nForm state:", "green"))
            print(json.dumps(form.value, indent=2))
            print(colored("Submitted payload:", "green"))
            print(json.dumps(build_payload(form.value, fields), indent=2))

            again = input(colored("\nFill another form? (yes/no): ", "cyan")).strip().lower()
            if again == "yes":
                continue
            if again != "no":
                logger.warning(f"Invalid choice: {again}")
                print(colored("Invalid input. Assuming 'no'...", "yellow"))
            logger.info("Exiting program")
            print(colored("Exiting program...", "blue"))
            break
    except EOFError:
        raise
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        print(colored(f"\n❌ Error: {e}", "red"))
        raise


def run():
    """Console script entry point."""
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        logger.info("Execution interrupted by user")
        print(colored("\n🛑 Execution interrupted by user.", "red"))
    except Exception:
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
