# app/client/product_form.py
"""
Formularz produktu sprzedawcy: walidacja pol, upload zdjec, wyslanie payloadu.

Stan formularza (FormState) jest niemutowalny. Zmiany ida przez czyste
funkcje przejscia (apply_upload_success, apply_removal, ...), a ProductForm
tylko je sklada z wywolaniami API i dwoma flagami zajetosci:
is_loading (wysylanie) i uploading_image (upload).
"""
import json
import math
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.client.api_client import ApiClient, ApiError
from app.client.query_cache import QueryCache
from app.domain.schemas import decode_image_binaries
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS_QUERY_KEY = ("/api/products",)

CATEGORIES: Dict[str, str] = {
    "art": "Art & Paintings",
    "jewelry": "Jewelry",
    "clothing": "Clothing",
    "home_decor": "Home Decor",
    "gifts": "Gifts",
    "accessories": "Accessories",
    "craft_supplies": "Craft Supplies",
    "paper_goods": "Paper Goods",
    "toys": "Toys & Games",
}

_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*")


# =====================================================
# WALIDACJA
# =====================================================
class FormValidationError(Exception):
    """Bledy pol formularza: nazwa pola -> komunikat."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


class ProductFormValues(BaseModel):
    """Wartosci formularza po walidacji. price i quantityAvailable zostaja stringami."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    price: str
    quantity_available: str = Field(..., alias="quantityAvailable")
    category: str
    images: List[str]

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        if len(value) < 5:
            raise PydanticCustomError("title_too_short", "Title must be at least 5 characters")
        return value

    @field_validator("description")
    @classmethod
    def check_description(cls, value: str) -> str:
        if len(value) < 20:
            raise PydanticCustomError(
                "description_too_short", "Description must be at least 20 characters"
            )
        return value

    @field_validator("price")
    @classmethod
    def check_price(cls, value: str) -> str:
        try:
            # float() przyjmuje "1_000", cena z formularza nie
            number = float(value) if "_" not in value else None
        except ValueError:
            number = None

        if number is None or not math.isfinite(number) or number <= 0:
            raise PydanticCustomError("invalid_price", "Price must be a positive number")
        return value

    @field_validator("quantity_available")
    @classmethod
    def check_quantity(cls, value: str) -> str:
        if not _INTEGER_RE.fullmatch(value) or int(value) < 0:
            raise PydanticCustomError(
                "invalid_quantity", "Quantity must be a non-negative number"
            )
        return value

    @field_validator("category")
    @classmethod
    def check_category(cls, value: str) -> str:
        if value not in CATEGORIES:
            raise PydanticCustomError("invalid_category", "Please select a category")
        return value

    @field_validator("images")
    @classmethod
    def check_images(cls, value: List[str]) -> List[str]:
        if len(value) < 1:
            raise PydanticCustomError("no_images", "At least one image is required")
        return value


def validate_product_form(data: Mapping[str, Any]) -> ProductFormValues:
    try:
        return ProductFormValues.model_validate(data)
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            errors.setdefault(field, err["msg"])
        raise FormValidationError(errors) from e


# =====================================================
# STAN I PRZEJSCIA
# =====================================================
class FormState(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    price: str = ""
    quantity_available: str = ""
    category: str = ""
    # kolejnosc = kolejnosc wysylki
    image_urls: Tuple[str, ...] = ()
    # url -> zakodowane zdjecie, do podgladu bez ponownego pobierania
    image_binaries: Dict[str, str] = Field(default_factory=dict)

    def values(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "quantityAvailable": self.quantity_available,
            "category": self.category,
            "images": list(self.image_urls),
        }

    def preview_source(self, url: str) -> str:
        return self.image_binaries.get(url) or url


_EDITABLE_FIELDS = ("title", "description", "price", "quantity_available", "category")


def apply_field_changes(state: FormState, **changes: str) -> FormState:
    unknown = set(changes) - set(_EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unknown form fields: {sorted(unknown)}")
    return state.model_copy(update=changes)


def apply_upload_success(state: FormState, url: str, data: str) -> FormState:
    return state.model_copy(
        update={
            "image_urls": state.image_urls + (url,),
            "image_binaries": {**state.image_binaries, url: data},
        }
    )


def apply_removal(state: FormState, index: int) -> FormState:
    if index < 0 or index >= len(state.image_urls):
        raise IndexError(f"No image at index {index}")

    url = state.image_urls[index]
    urls = state.image_urls[:index] + state.image_urls[index + 1:]

    binaries = dict(state.image_binaries)
    # ten sam url moze byc dodany dwa razy, podglad zostaje dla pozostalego
    if url not in urls:
        binaries.pop(url, None)

    return state.model_copy(update={"image_urls": urls, "image_binaries": binaries})


def reset_state() -> FormState:
    return FormState()


def state_from_product(product: Mapping[str, Any]) -> FormState:
    """Stan startowy formularza edycji z produktu zwroconego przez API."""
    price = product.get("price")
    quantity = product.get("quantityAvailable")

    return FormState(
        title=product.get("title") or "",
        description=product.get("description") or "",
        price="" if price is None else str(price),
        quantity_available="" if quantity is None else str(quantity),
        category=product.get("category") or "",
        image_urls=tuple(product.get("images") or ()),
        image_binaries=decode_image_binaries(product.get("imageBinaries")),
    )


def build_payload(
    seller_id: int,
    values: ProductFormValues,
    image_binaries: Mapping[str, str],
) -> Dict[str, Any]:
    return {
        "sellerId": seller_id,
        "title": values.title,
        "description": values.description,
        # cena idzie jako string, bez konwersji
        "price": values.price,
        "quantityAvailable": int(values.quantity_available),
        "category": values.category,
        "images": list(values.images),
        "imageBinaries": json.dumps(dict(image_binaries)),
    }


def cached_products(api: ApiClient, cache: QueryCache, seller_id: int | None = None) -> list:
    key = PRODUCTS_QUERY_KEY + ((seller_id,) if seller_id is not None else ())
    return cache.fetch(key, lambda: api.list_products(seller_id))


# =====================================================
# KONTROLER
# =====================================================
class Toast(BaseModel):
    title: str
    description: str
    variant: str = "default"


class SelectedFile(BaseModel):
    filename: str
    content_type: str
    content: bytes


def _log_toast(toast: Toast) -> None:
    logger.info(f"[TOAST] {toast.title}: {toast.description}")


class ProductForm:
    """
    Formularz tworzenia (product=None) albo edycji produktu.
    Bledy nie sa rzucane dalej - trafiaja do uzytkownika jako toast
    albo do `errors` (walidacja pol).
    """

    def __init__(
        self,
        api: ApiClient,
        cache: QueryCache | None = None,
        seller_id: int | None = None,
        product: Mapping[str, Any] | None = None,
        on_success: Callable[[], None] | None = None,
        notify: Callable[[Toast], None] | None = None,
    ):
        self.api = api
        self.cache = cache if cache is not None else QueryCache()
        self.seller_id = seller_id
        self.product = product
        self.on_success = on_success
        self.notify = notify or _log_toast

        self.state = state_from_product(product) if product else reset_state()
        self.errors: Dict[str, str] = {}
        self.is_loading = False
        self.uploading_image = False

    @property
    def is_edit(self) -> bool:
        return self.product is not None

    @property
    def can_submit(self) -> bool:
        return not (self.is_loading or self.uploading_image)

    def _toast(self, title: str, description: str, variant: str = "default"):
        self.notify(Toast(title=title, description=description, variant=variant))

    def set_fields(self, **changes: str) -> None:
        self.state = apply_field_changes(self.state, **changes)

    # =====================================================
    # ZDJECIA
    # =====================================================
    def select_image(self, file: Optional[SelectedFile]) -> bool:
        if file is None:
            return False

        if self.uploading_image:
            logger.warning(f"Upload in progress, ignoring {file.filename}")
            return False

        if not file.content_type.startswith("image/"):
            self._toast(
                "Invalid File Type",
                "Please upload an image file (JPEG, PNG, etc.)",
                "destructive",
            )
            return False

        self.uploading_image = True
        try:
            data = self.api.upload_image(file.filename, file.content, file.content_type)
            self.state = apply_upload_success(self.state, data["imageUrl"], data["imageData"])
            self._toast("Image Uploaded", "Image has been successfully uploaded")
            return True
        except (ApiError, requests.RequestException, ValueError, KeyError) as e:
            logger.warning(f"Upload of {file.filename} failed: {e}")
            self._toast(
                "Upload Failed",
                str(e) or "An error occurred while uploading the image",
                "destructive",
            )
            return False
        finally:
            self.uploading_image = False

    def remove_image(self, index: int) -> None:
        # upload po stronie serwera zostaje (brak sprzatania osieroconych plikow)
        self.state = apply_removal(self.state, index)

    # =====================================================
    # WYSYLKA
    # =====================================================
    def submit(self) -> bool:
        if not self.can_submit:
            logger.warning("Submit ignored, form is busy")
            return False

        if self.seller_id is None:
            self._toast(
                "Authentication Error",
                "You must be logged in to perform this action",
                "destructive",
            )
            return False

        try:
            values = validate_product_form(self.state.values())
        except FormValidationError as e:
            self.errors = e.errors
            return False

        self.errors = {}
        self.is_loading = True
        try:
            payload = build_payload(self.seller_id, values, self.state.image_binaries)

            if self.is_edit:
                self.api.update_product(self.product["id"], payload)
                self._toast("Product Updated", "Your product has been updated successfully")
            else:
                self.api.create_product(payload)
                self._toast("Product Created", "Your product has been created successfully")

            self.cache.invalidate(PRODUCTS_QUERY_KEY)

            if self.on_success:
                self.on_success()

            if not self.is_edit:
                self.state = reset_state()

            return True
        except (ApiError, requests.RequestException) as e:
            logger.warning(f"Product submit failed: {e}")
            self._toast(
                "Update Failed" if self.is_edit else "Creation Failed",
                str(e) or "An error occurred",
                "destructive",
            )
            return False
        finally:
            self.is_loading = False
