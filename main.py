import asyncio
import logging

from config.settings import FormSettings
from registration.controller import RegistrationFormController
from registration.masks import masked_value
from registration.state import FieldName
from registration.submitter import MockSubmitter


async def main():
    patches = [
        {FieldName.NAME: "J", FieldName.EMAIL: "joana@exemplo", FieldName.PASSWORD: "abcdefg1"},
        {FieldName.NAME: "Joana D'Arc", FieldName.POSTAL_CODE: "01310100", FieldName.TAX_ID: "1234567890"},
        {FieldName.TAX_ID: "12345678901", FieldName.PHONE: "11987654321"},
        {FieldName.EMAIL: "joana@exemplo.com.br", FieldName.PASSWORD: "Abcdefg1!"},
    ]

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    # load settings from env / .env
    settings = FormSettings.from_env()

    submitter = MockSubmitter(delay_seconds=settings.submit_delay_seconds)
    form = RegistrationFormController.from_settings(settings, submitter)

    # type, then blur, every field in each patch
    for i, patch in enumerate(patches, 1):
        for field, keystrokes in patch.items():
            form.set_field_value(field, masked_value(field, keystrokes))
            form.touch_field(field)

        print(f"\nPATCH #{i}")
        print("values:", form.state.values.model_dump(exclude={"password"}))
        print("visible_errors:", form.visible_errors())
        print("can_submit:", form.can_submit)

    result = await form.submit()

    if result is not None:
        print("\noutcome:", result.outcome.value if result.outcome else None)
        print("submit_error:", result.submit_error)
    else:
        print("\nSubmit not allowed. Current errors:", form.visible_errors())

    print("status:", form.state.status.value)
    print("payloads received:", len(submitter.received))


if __name__ == "__main__":
    asyncio.run(main())
