"""Physical and simplified reflectance curves sampled for plotting."""

from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from metalfresnel.sampling._cosine_samples import cosine_samples
from metalfresnel.shading import (
    artist_fresnel,
    complex_fresnel,
    metallic_fresnel,
)


@tensorclass
class ReflectanceCurves:
    """Three reflectance curves of one metal sampled at shared angles.

    Attributes
    ----------
    cosine : Tensor
        Viewing-angle cosines, shape (S,), ascending in (0, 1).
    physical : Tensor
        Physical complex Fresnel reflectance, shape (S, 3).
    metallic : Tensor
        Metallic model with the fitted IOR, shape (S, 3).
    artist : Tensor
        Artist-friendly model without IOR, shape (S, 3).
    """

    cosine: Tensor
    physical: Tensor
    metallic: Tensor
    artist: Tensor


def sample_reflectance_curves(
    n: Tensor,
    k: Tensor,
    base: Tensor,
    grazing: Tensor,
    ior: Union[Tensor, float],
    num_angles: int,
) -> ReflectanceCurves:
    """Evaluate the physical, metallic and artist curves of one metal.

    Parameters
    ----------
    n, k : Tensor, shape (3,)
        Complex index of refraction per channel.
    base, grazing : Tensor, shape (3,)
        Reflectance colors at normal and grazing incidence.
    ior : Tensor or float
        Index of refraction of the metallic model.
    num_angles : int
        Sampling density, see :func:`cosine_samples`.

    Returns
    -------
    ReflectanceCurves
        Curves sampled at ``num_angles - 1`` cosines.
    """
    cosine = cosine_samples(num_angles, dtype=n.dtype, device=n.device)
    column = cosine.unsqueeze(-1)

    return ReflectanceCurves(
        cosine=cosine,
        physical=complex_fresnel(n, k, column),
        metallic=metallic_fresnel(base, grazing, ior, column),
        artist=artist_fresnel(base, grazing, column),
        batch_size=cosine.shape,
    )
