"""
좌표 변환 유틸리티
"""


def scale_body_part_coords(coordinates, input_dims, screen_dims, offset, mirror_screen):
    """
    Map a keypoint from model-input pixel space to screen space.

    Parameters:
        coordinates: (x, y) in the cropped input image
        input_dims: (width, height) of the model input
        screen_dims: (width, height) of the display surface
        offset: (x, y) crop offset in source pixels
        mirror_screen: flip the horizontal axis when True
    """
    # Scale between the smaller screen side and the smaller input side
    min_img_scale = min(screen_dims[0], screen_dims[1]) / min(input_dims[0], input_dims[1])

    x = (coordinates[0] + offset[0]) * min_img_scale
    y = (coordinates[1] + offset[1]) * min_img_scale

    if mirror_screen:
        x = screen_dims[0] - x

    return (x, y)
