from .loss import (
    LOSSES,
    get_loss,
    residuals,
    sum_abs_residuals,
    sum_residuals,
    sum_squared_residuals,
)
from .landscape import loss_profile, loss_surface
